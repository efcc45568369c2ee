# juwonjulog/metrics.py
from fastapi import FastAPI
from prometheus_client import Counter
from prometheus_fastapi_instrumentator import Instrumentator, metrics
from prometheus_fastapi_instrumentator.metrics import Info

from juwonjulog.config import MetricsConfig

# 커스텀 메트릭: http_requests_total_custom
# api-gateway와 동일한 형식의 status 레이블(2xx, 4xx, 5xx)을 사용
http_requests_total_custom = Counter(
    "http_requests_total",
    "Total number of HTTP requests",
    ("method", "status"),
)


def status_group(status_code: int) -> str:
    if 200 <= status_code < 300:
        return "2xx"
    elif 300 <= status_code < 400:
        return "3xx"
    elif 400 <= status_code < 500:
        return "4xx"
    elif 500 <= status_code < 600:
        return "5xx"
    return "unknown"


def http_requests_total_custom_metric(info: Info) -> None:
    # response is None when the handler raised
    status_code = info.response.status_code if info.response is not None else 500
    http_requests_total_custom.labels(info.method, status_group(status_code)).inc()


def configure_metrics(application: FastAPI, config: MetricsConfig) -> None:
    """Configure Prometheus request latency metrics and expose them on /metrics."""
    instrumentator = Instrumentator()
    instrumentator.add(metrics.latency(buckets=config.latency_buckets))

    # 커스텀 메트릭 추가
    instrumentator.add(http_requests_total_custom_metric)
    instrumentator.instrument(application).expose(application)
