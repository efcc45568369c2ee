import logging

from juwonjulog.app import create_app
from juwonjulog.config import Config

# --- 기본 로깅 ---
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger('BlogServiceApp')

config = Config()
app = create_app(config)

if __name__ == "__main__":
    import uvicorn
    logger.info(f"Blog Service starting on http://{config.server.host}:{config.server.port}")
    uvicorn.run(app, host=config.server.host, port=config.server.port)
