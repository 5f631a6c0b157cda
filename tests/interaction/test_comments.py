def test_add_comment_trims_text_and_attributes_author(client, bob, video):
    response = client.post(
        f"/api/videos/{video['id']}/comments",
        json={"text": "   great video!  \n"},
        headers=bob["headers"],
    )
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Comment added successfully"
    comment = body["comment"]
    assert comment["text"] == "great video!"
    assert comment["author"] == "bob@x.com"
    assert "id" in comment and "timestamp" in comment

    listed = client.get(f"/api/videos/{video['id']}/comments").json()["comments"]
    assert [c["text"] for c in listed] == ["great video!"]


def test_whitespace_only_comment_is_rejected(client, bob, video):
    response = client.post(
        f"/api/videos/{video['id']}/comments", json={"text": " \t\n "}, headers=bob["headers"]
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Comment text is required"}
    assert client.get(f"/api/videos/{video['id']}/comments").json()["comments"] == []


def test_missing_comment_text_is_rejected(client, bob, video):
    response = client.post(f"/api/videos/{video['id']}/comments", json={}, headers=bob["headers"])
    assert response.status_code == 400


def test_comments_are_listed_oldest_first(client, alice, bob, video):
    for i, who in enumerate((alice, bob, alice, bob)):
        client.post(
            f"/api/videos/{video['id']}/comments", json={"text": f"c{i}"}, headers=who["headers"]
        )

    comments = client.get(f"/api/videos/{video['id']}/comments").json()["comments"]
    assert [c["text"] for c in comments] == ["c0", "c1", "c2", "c3"]
    assert [c["author"] for c in comments] == ["alice@x.com", "bob@x.com"] * 2
    timestamps = [c["timestamp"] for c in comments]
    assert timestamps == sorted(timestamps)


def test_comment_requires_token(client, video):
    response = client.post(f"/api/videos/{video['id']}/comments", json={"text": "hi"})
    assert response.status_code == 401


def test_comment_on_unknown_video_is_404(client, bob):
    response = client.post(
        "/api/videos/00000000-0000-0000-0000-000000000000/comments",
        json={"text": "hi"},
        headers=bob["headers"],
    )
    assert response.status_code == 404


def test_comments_for_unknown_video_is_empty(client):
    response = client.get("/api/videos/00000000-0000-0000-0000-000000000000/comments")
    assert response.status_code == 200
    assert response.json() == {"comments": []}
