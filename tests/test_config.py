import config


def test_page_size_clamped():
    assert config._page_size("10") == 10
    assert config._page_size("0") == 1
    assert config._page_size("-3") == 1
    assert config._page_size("1000") == config.MAX_QUESTIONS
    assert config._page_size("ten") == 10


def test_log_level_falls_back_to_info():
    assert config._log_level("debug") == "DEBUG"
    assert config._log_level("WARNING") == "WARNING"
    assert config._log_level("LOUD") == "INFO"
    assert config._log_level("") == "INFO"
