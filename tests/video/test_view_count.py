from concurrent.futures import ThreadPoolExecutor

from vidshare.services.video_service import VideoService


def test_concurrent_views_are_all_counted(client, app, video):
    database = app.state.database
    media_store = app.state.media_store
    calls = 20

    def view(_):
        db = database.session()
        try:
            return VideoService(db, media_store).get_by_id(video["id"]).views
        finally:
            db.close()

    with ThreadPoolExecutor(max_workers=4) as pool:
        seen = list(pool.map(view, range(calls)))

    # Each caller gets its own post-increment value, none lost or repeated.
    assert sorted(seen) == list(range(1, calls + 1))
    assert client.get("/api/videos").json()["videos"][0]["views"] == calls
