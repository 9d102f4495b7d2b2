import logging

from simple_timer import Timer
from simple_timer.utils import clock
from simple_timer.utils.logging import ROOT_LOGGER, get_logger, setup_file_logger


def test_hires_probe_cached(monkeypatch):
    calls = []

    def probe():
        calls.append(1)
        return False

    monkeypatch.setattr(clock, "_probe_hires", probe)
    clock.clear_hires_cache()
    try:
        assert clock.hires_available() is False
        assert clock.hires_available() is False
        assert len(calls) == 1
    finally:
        clock.clear_hires_cache()


def test_now_sources():
    assert isinstance(clock.now(False), int)
    assert isinstance(clock.now(True), float)


def test_interval():
    assert clock.interval(10, 15, False) == 5
    assert clock.interval(1.25, 2.0, True) == 0.75


def test_get_logger_is_child():
    assert get_logger("timer").name == f"{ROOT_LOGGER}.timer"


def test_setup_file_logger_writes(tmp_path, fake_clock):
    log_path = tmp_path / "timer.log"
    logger = setup_file_logger(log_path)
    try:
        t = Timer(hires=False)
        t.stop()
        for handler in logger.handlers:
            handler.flush()
        text = log_path.read_text()
        assert "started" in text
        assert "stopped" in text
    finally:
        for handler in list(logger.handlers):
            if isinstance(handler, logging.FileHandler):
                logger.removeHandler(handler)
                handler.close()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)
