from uqgrade.data import CourseCache


def test_missing_file_is_a_miss(tmp_path, when):
    assert CourseCache(when, tmp_path).load("CSSE1001") is None


def test_store_and_load(tmp_path, when, quiz_exam):
    cache = CourseCache(when, tmp_path / "nested")
    assert cache.store(quiz_exam)
    assert cache.path("CSSE1001").name == "2024-1-CSSE1001"
    assert cache.load("CSSE1001") == quiz_exam


def test_cache_file_format(tmp_path, when, quiz_exam):
    cache = CourseCache(when, tmp_path)
    cache.store(quiz_exam)
    assert cache.path("CSSE1001").read_text() == (
        '{"name": "CSSE1001", "assessment": [{"name": "Quiz", "weight": 10.0}, '
        '{"name": "Exam", "weight": 90.0}]}'
    )


def test_corrupt_file_is_a_miss(tmp_path, when):
    cache = CourseCache(when, tmp_path)
    cache.path("CSSE1001").write_text("{not json")
    assert cache.load("CSSE1001") is None
    cache.path("CSSE1001").write_text('{"name": "CSSE1001"}')
    assert cache.load("CSSE1001") is None


def test_failed_write_is_reported(tmp_path, when, quiz_exam):
    blocker = tmp_path / "file"
    blocker.write_text("")
    cache = CourseCache(when, blocker)
    assert not cache.store(quiz_exam)
