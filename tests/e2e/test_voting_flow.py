"""End-to-end tests for memes, comments, resources and votes."""

from tests.e2e.helpers import register


def create_meme(client, caption: str = "Can you make it pop more?"):
    response = client.post(
        "/api/memes",
        json={"image_url": "https://img.example.com/pop.png", "caption": caption},
    )
    assert response.status_code == 201, response.text
    return response.json()["meme"]


class TestMemeFlow:
    """Posting, voting and listing memes."""

    def test_anonymous_cannot_post(self, client):
        response = client.post(
            "/api/memes", json={"image_url": "https://img.example.com/a.png"}
        )

        assert response.status_code == 401

    def test_vote_sequence_and_feed(self, client):
        # Arrange
        register(client)
        meme = create_meme(client)
        url = f"/api/memes/{meme['id']}/vote"

        # Act & Assert
        first = client.post(url, json={"vote": "up"}).json()
        assert (first["upvotes"], first["downvotes"]) == (1, 0)
        assert first["user_vote"] == "up"

        repeat = client.post(url, json={"vote": "up"}).json()
        assert (repeat["upvotes"], repeat["downvotes"]) == (0, 0)
        assert repeat["user_vote"] is None

        down = client.post(url, json={"vote": "down"}).json()
        assert (down["upvotes"], down["downvotes"]) == (0, 1)

        feed = client.get("/api/memes", params={"sort": "hot"}).json()
        [item] = feed["memes"]
        assert item["user_vote"] == "down"
        assert item["author"]["username"] == "pixel_pusher"

    def test_vote_on_missing_meme(self, client):
        register(client)

        response = client.post("/api/memes/999/vote", json={"vote": "up"})

        assert response.status_code == 404

    def test_unknown_direction_rejected(self, client):
        register(client)
        meme = create_meme(client)

        response = client.post(f"/api/memes/{meme['id']}/vote", json={"vote": "sideways"})

        assert response.status_code == 422

    def test_pagination_and_limit_bounds(self, client):
        register(client)
        for i in range(3):
            create_meme(client, caption=f"Revision {i}")

        page = client.get("/api/memes", params={"sort": "new", "offset": 3, "limit": 10})
        too_big = client.get("/api/memes", params={"limit": 101})

        assert page.status_code == 200
        assert page.json()["memes"] == []
        assert too_big.status_code == 422

    def test_get_single_meme(self, client):
        register(client)
        meme = create_meme(client)

        assert client.get(f"/api/memes/{meme['id']}").status_code == 200
        assert client.get("/api/memes/424242").status_code == 404


class TestCommentFlow:
    """Commenting and comment votes."""

    def test_comment_and_upvote_toggle(self, client):
        # Arrange
        register(client)
        meme = create_meme(client)

        # Act
        created = client.post(
            "/api/comments", json={"meme_id": meme["id"], "body": "Use Comic Sans"}
        )
        comment_id = created.json()["comment"]["id"]
        first = client.post(f"/api/comments/{comment_id}/vote").json()
        second = client.post(f"/api/comments/{comment_id}/vote").json()
        listed = client.get(f"/api/memes/{meme['id']}/comments").json()

        # Assert
        assert created.status_code == 201
        assert first["upvotes"] == 1
        assert second["upvotes"] == 0
        assert [c["body"] for c in listed["comments"]] == ["Use Comic Sans"]

    def test_comments_on_missing_meme(self, client):
        assert client.get("/api/memes/404/comments").status_code == 404


class TestResourceFlow:
    """Library listing and signed resource votes."""

    def test_seeded_resources_and_category_filter(self, client):
        all_resources = client.get("/api/resources").json()["resources"]
        pricing = client.get("/api/resources", params={"category": "pricing"}).json()

        assert len(all_resources) == 3
        assert [r["title"] for r in pricing["resources"]] == ["Real Price Calculator"]

    def test_resource_vote_sequence(self, client):
        register(client)
        url = "/api/resources/1/vote"

        assert client.post(url, json={"vote": "up"}).json()["votes"] == 1
        assert client.post(url, json={"vote": "down"}).json()["votes"] == -1
        assert client.post(url, json={"vote": "down"}).json()["votes"] == 0

    def test_create_resource(self, client):
        register(client)

        response = client.post(
            "/api/resources", json={"title": "Kill Fee Clause", "category": "contracts"}
        )

        assert response.status_code == 201
        assert response.json()["resource"]["id"] == 4


class TestGameAndNewsletter:
    """Game sessions and newsletter signups."""

    def test_game_sessions_are_private(self, client):
        owner = register(client, username="owner")
        created = client.post("/api/game/sessions", json={"sanity_left": 100})
        session_id = created.json()["session"]["id"]

        updated = client.patch(
            f"/api/game/sessions/{session_id}", json={"score": 3}
        )
        own = client.get(f"/api/game/sessions/{owner['user']['id']}")

        client.cookies.clear()
        register(client, username="snoop")
        other = client.get(f"/api/game/sessions/{owner['user']['id']}")

        assert created.status_code == 201
        assert updated.json()["session"]["score"] == 3
        assert len(own.json()["sessions"]) == 1
        assert other.status_code == 403

    def test_newsletter_subscribe_twice(self, client):
        first = client.post("/api/newsletter/subscribe", json={"email": "fan@example.com"})
        second = client.post(
            "/api/newsletter/subscribe", json={"email": "FAN@example.com"}
        )
        invalid = client.post("/api/newsletter/subscribe", json={"email": "nope"})

        assert first.json()["subscribed"] is True
        assert second.json()["message"] == "You are already subscribed"
        assert invalid.status_code == 400
