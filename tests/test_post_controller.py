"""
HTTP API 테스트 (FastAPI TestClient)
"""
from juwonjulog.app import create_app
from juwonjulog.config import Config, DatabaseConfig, MetricsConfig
from fastapi.testclient import TestClient


def write_posts(client, posts):
    for data in posts:
        assert client.post("/posts", json=data).status_code == 200


def latest_post_id(client):
    return client.get("/posts?page=1&size=1").json()[0]["id"]


class TestCreatePost:

    def test_returns_empty_object(self, client, sample_post):
        """게시글 작성 시 빈 오브젝트를 출력"""
        response = client.post("/posts", json=sample_post)

        assert response.status_code == 200
        assert response.json() == {}

    def test_saves_post(self, client, sample_post):
        client.post("/posts", json=sample_post)

        posts = client.get("/posts").json()
        assert len(posts) == 1
        assert posts[0]["title"] == "글 제목"
        assert posts[0]["content"] == "글 내용..."

    def test_blank_title_returns_error_object(self, client):
        """title 값이 null 또는 공백이면 json 에러 객체를 출력"""
        for title in [None, "", "  "]:
            response = client.post("/posts", json={"title": title, "content": "내용입니다."})

            assert response.status_code == 400
            assert response.json() == {
                "code": "400",
                "message": "잘못된 요청입니다.",
                "validation": {"title": "제목을 입력해주세요."},
            }

    def test_only_first_field_error_reported(self, client):
        response = client.post("/posts", json={})

        assert response.status_code == 400
        assert response.json()["validation"] == {"title": "제목을 입력해주세요."}

    def test_blank_content(self, client):
        response = client.post("/posts", json={"title": "제목", "content": ""})

        assert response.status_code == 400
        assert response.json()["validation"] == {"content": "내용을 입력해주세요."}

    def test_swear_word_in_title(self, client):
        """제목에 욕 제한"""
        response = client.post("/posts", json={"title": "나는 욕을 합니다", "content": "내용"})

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "400"
        assert body["message"] == "잘못된 요청입니다."
        assert body["validation"]["title"] == "제목에 욕을 포함할 수 없습니다."
        assert client.get("/posts").json() == []

    def test_malformed_body(self, client):
        response = client.post(
            "/posts",
            content="not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "400"
        assert len(response.json()["validation"]) == 1


class TestGetPost:

    def test_get_post(self, client, sample_post):
        """게시글 단건 조회"""
        client.post("/posts", json=sample_post)
        post_id = latest_post_id(client)

        response = client.get(f"/posts/{post_id}")

        assert response.status_code == 200
        assert response.json() == {"id": post_id, "title": "글 제목", "content": "글 내용..."}

    def test_get_nonexistent_post(self, client):
        response = client.get("/posts/1")

        assert response.status_code == 404
        assert response.json() == {
            "code": "404",
            "message": "존재하지 않는 글입니다.",
            "validation": {},
        }

    def test_title_max_length_is_10(self, client):
        """단건 조회 시 title 길이는 최대 10"""
        client.post("/posts", json={"title": "123456789012345", "content": "long"})
        long_id = latest_post_id(client)
        client.post("/posts", json={"title": "12345", "content": "short"})
        short_id = latest_post_id(client)

        assert client.get(f"/posts/{long_id}").json()["title"] == "1234567890"
        assert client.get(f"/posts/{short_id}").json()["title"] == "12345"

    def test_non_integer_id(self, client):
        response = client.get("/posts/abc")

        assert response.status_code == 400
        assert "post_id" in response.json()["validation"]


class TestGetPosts:

    def test_first_page_desc(self, client, sample_posts):
        """1페이지, 글 10개 내림차순"""
        write_posts(client, sample_posts)

        response = client.get("/posts?page=1&size=10")

        assert response.status_code == 200
        posts = response.json()
        assert len(posts) == 10
        assert posts[0]["title"] == "title_30"
        assert posts[0]["content"] == "content_30"
        assert posts[9]["title"] == "title_21"
        assert posts[9]["content"] == "content_21"

    def test_page_zero_returns_first_page(self, client, sample_posts):
        """0페이지 조회 요청해도 1페이지 출력"""
        write_posts(client, sample_posts)

        assert client.get("/posts?page=0&size=10").json() == client.get("/posts?page=1&size=10").json()

    def test_defaults(self, client, sample_posts):
        write_posts(client, sample_posts)

        posts = client.get("/posts").json()

        assert len(posts) == 10
        assert posts[0]["title"] == "title_30"

    def test_empty(self, client):
        assert client.get("/posts").json() == []

    def test_huge_page_returns_empty(self, client, sample_posts):
        """64비트 범위를 넘는 page도 빈 목록"""
        write_posts(client, sample_posts[:3])

        response = client.get("/posts?page=9999999999999999999&size=10")

        assert response.status_code == 200
        assert response.json() == []


class TestOutOfRangeIds:
    """저장 불가능한 범위의 id는 모두 404"""

    HUGE_ID = 99999999999999999999

    def test_get(self, client):
        response = client.get(f"/posts/{self.HUGE_ID}")

        assert response.status_code == 404
        assert response.json()["message"] == "존재하지 않는 글입니다."

    def test_patch(self, client):
        response = client.patch(f"/posts/{self.HUGE_ID}", json={"title": "t", "content": "c"})

        assert response.status_code == 404

    def test_delete(self, client):
        assert client.delete(f"/posts/{self.HUGE_ID}").status_code == 404

    def test_int4_boundary(self, client):
        assert client.get("/posts/2147483648").status_code == 404
        assert client.get("/posts/0").status_code == 404
        assert client.get("/posts/-5").status_code == 404


class TestLongTitle:

    def test_long_title_stored_in_full(self, client):
        """255자를 넘는 제목도 저장되고 응답은 10자"""
        title = "a" * 256
        response = client.post("/posts", json={"title": title, "content": "c"})
        assert response.status_code == 200
        post_id = latest_post_id(client)

        client.patch(f"/posts/{post_id}", json={"content": "edited"})

        assert client.get(f"/posts/{post_id}").json() == {"id": post_id, "title": "a" * 10, "content": "edited"}


class TestEditPost:

    def test_edit_title(self, client):
        """게시글 제목 수정"""
        client.post("/posts", json={"title": "title", "content": "content"})
        post_id = latest_post_id(client)

        response = client.patch(f"/posts/{post_id}", json={"title": "edited", "content": "content"})

        assert response.status_code == 200
        assert response.json() == {}
        assert client.get(f"/posts/{post_id}").json() == {"id": post_id, "title": "edited", "content": "content"}

    def test_edit_content(self, client):
        client.post("/posts", json={"title": "title", "content": "content"})
        post_id = latest_post_id(client)

        client.patch(f"/posts/{post_id}", json={"title": "title", "content": "edited_content"})

        assert client.get(f"/posts/{post_id}").json()["content"] == "edited_content"

    def test_edit_nonexistent_post(self, client):
        response = client.patch("/posts/1", json={"title": "edited_title", "content": "edited_content"})

        assert response.status_code == 404
        assert response.json()["code"] == "404"


class TestDeletePost:

    def test_delete_post(self, client):
        client.post("/posts", json={"title": "title", "content": "content"})
        post_id = latest_post_id(client)

        response = client.delete(f"/posts/{post_id}")

        assert response.status_code == 200
        assert response.json() == {}
        assert client.get(f"/posts/{post_id}").status_code == 404
        assert client.delete(f"/posts/{post_id}").status_code == 404

    def test_delete_nonexistent_post(self, client):
        assert client.delete("/posts/1").status_code == 404


class TestOperationalEndpoints:

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok", "service": "blog-service"}

    def test_stats_reports_post_count(self, client, sample_posts):
        write_posts(client, sample_posts[:3])

        stats = client.get("/stats").json()

        assert stats == {"blog_service": {"service_status": "online", "post_count": 3}}

    def test_metrics_exposed(self, temp_db_path):
        config = Config(
            database=DatabaseConfig(use_postgres=False, database_path=temp_db_path),
            metrics=MetricsConfig(enabled=True),
        )
        with TestClient(create_app(config)) as client:
            client.get("/health")
            response = client.get("/metrics")

        assert response.status_code == 200
        assert "http_requests_total" in response.text
