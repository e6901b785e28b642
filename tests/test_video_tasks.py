from bson import ObjectId

from common.tasks.video_tasks import record_video_view_task


def test_record_view_increments_and_tracks_history(app, db, alice, bob, make_video):
    video_id = make_video(alice)

    with app.app_context():
        first = record_video_view_task.apply(args=[str(video_id), str(bob)]).get()
        record_video_view_task.apply(args=[str(video_id), str(bob)]).get()

    assert first == {'status': 'success', 'video_id': str(video_id)}
    assert db['videos'].find_one({'_id': video_id})['views'] == 2
    assert db['users'].find_one({'_id': bob})['watch_history'] == [video_id]


def test_record_view_without_principal(app, db, alice, make_video):
    video_id = make_video(alice)

    with app.app_context():
        record_video_view_task.apply(args=[str(video_id), None]).get()

    assert db['videos'].find_one({'_id': video_id})['views'] == 1


def test_record_view_skips_invalid_ids(app, db):
    with app.app_context():
        result = record_video_view_task.apply(args=['bogus']).get()

    assert result['status'] == 'skipped'


def test_record_view_for_missing_video_is_harmless(app, db, bob):
    with app.app_context():
        result = record_video_view_task.apply(args=[str(ObjectId()), str(bob)]).get()

    assert result['status'] == 'success'
