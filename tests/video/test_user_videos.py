from conftest import upload_video


def test_list_by_owner_filters_and_orders_newest_first(client, alice, bob):
    upload_video(client, alice["token"], title="a1")
    upload_video(client, bob["token"], title="b1")
    upload_video(client, alice["token"], title="a2")

    response = client.get(f"/api/users/{alice['user']['id']}/videos")
    assert response.status_code == 200
    videos = response.json()["videos"]
    assert [v["title"] for v in videos] == ["a2", "a1"]
    assert all(v["author"] == "alice@x.com" for v in videos)


def test_list_by_owner_for_unknown_user_is_empty(client):
    response = client.get("/api/users/00000000-0000-0000-0000-000000000000/videos")
    assert response.status_code == 200
    assert response.json() == {"videos": []}


def test_liked_videos_ordered_by_like_time(client, alice, bob):
    first = upload_video(client, alice["token"], title="first").json()["video"]
    second = upload_video(client, alice["token"], title="second").json()["video"]

    client.post(f"/api/videos/{second['id']}/like", headers=bob["headers"])
    client.post(f"/api/videos/{first['id']}/like", headers=bob["headers"])

    response = client.get(f"/api/users/{bob['user']['id']}/liked-videos")
    assert response.status_code == 200
    videos = response.json()["videos"]

    assert [v["title"] for v in videos] == ["first", "second"]
    assert all("likedAt" in v for v in videos)
    assert videos[0]["likedAt"] >= videos[1]["likedAt"]
    assert all(v["likes"] == 1 for v in videos)


def test_unliked_video_drops_out_of_liked_list(client, alice, bob, video):
    client.post(f"/api/videos/{video['id']}/like", headers=bob["headers"])
    client.post(f"/api/videos/{video['id']}/like", headers=bob["headers"])

    response = client.get(f"/api/users/{bob['user']['id']}/liked-videos")
    assert response.json()["videos"] == []
