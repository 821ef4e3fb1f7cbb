import json

import pytest

from hpcover.requests_queue import HttpMethod, HttpRequestFrame, RequestQueue


def make_frame(method=HttpMethod.POST, **data):
    frame = HttpRequestFrame(method, dict(data))
    frame.setup("https://example.com/update", "placeholder")
    return frame


def test_post_setup_sets_content_type_and_authorization():
    frame = make_frame(HttpMethod.POST)
    assert frame.url == "https://example.com/update"
    assert frame.headers["Content-Type"] == "application/json"
    assert frame.headers["Authorization"] == "placeholder"


def test_get_setup_has_no_content_type():
    frame = make_frame(HttpMethod.GET)
    assert "Content-Type" not in frame.headers
    assert frame.headers["Authorization"] == "placeholder"


def test_body_round_trips_data():
    frame = make_frame(session_id=7, update="steps_log")
    assert json.loads(frame.body) == {"session_id": 7, "update": "steps_log"}


def test_new_queue_is_empty():
    queue = RequestQueue()
    assert queue.is_empty() is True
    assert len(queue) == 0


def test_requests_are_sent_in_arrival_order():
    queue = RequestQueue()
    frames = [make_frame(n=i) for i in range(3)]
    for frame in frames:
        queue.add(frame)
    sent = []
    while not queue.is_empty():
        assert queue.execute_next(sent.append) is not None
        queue.finished(True)
    assert sent == frames


def test_only_one_request_in_flight():
    queue = RequestQueue()
    queue.add(make_frame(n=1))
    queue.add(make_frame(n=2))
    sent = []
    first = queue.execute_next(sent.append)
    assert queue.execute_next(sent.append) is None
    assert sent == [first]
    assert queue.in_process is True


def test_execute_on_empty_queue_sends_nothing():
    queue = RequestQueue()
    sent = []
    assert queue.execute_next(sent.append) is None
    assert sent == []
    assert queue.in_process is False


def test_failed_request_stays_and_reports():
    failures = []
    queue = RequestQueue(on_failure=lambda: failures.append(True))
    frame = make_frame(n=1)
    queue.add(frame)
    queue.execute_next(lambda task: None)
    queue.finished(False)
    assert failures == [True]
    assert list(queue) == [frame]
    assert queue.in_process is False


def test_failed_request_is_retried():
    queue = RequestQueue()
    frame = make_frame(n=1)
    queue.add(frame)
    sent = []
    queue.execute_next(sent.append)
    queue.finished(False)
    queue.execute_next(sent.append)
    queue.finished(True)
    assert sent == [frame, frame]
    assert queue.is_empty()


def test_successful_request_leaves_queue():
    queue = RequestQueue()
    first, second = make_frame(n=1), make_frame(n=2)
    queue.add(first)
    queue.add(second)
    queue.execute_next(lambda task: None)
    queue.finished(True)
    assert list(queue) == [second]


def test_send_error_releases_queue():
    queue = RequestQueue()
    queue.add(make_frame(n=1))

    def broken(task):
        raise ConnectionError("down")

    with pytest.raises(ConnectionError):
        queue.execute_next(broken)
    assert queue.in_process is False
    assert len(queue) == 1