import json
import logging

import pytest

from kv_namespace.log import configure_logging


pytestmark = pytest.mark.usefixtures("restore_package_logger")


def test_configure_logging_json(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("info", "json")
    logging.getLogger("kv_namespace.backends.redis").info("connecting redis backend to %s", "redis://x")

    payload = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert payload["level"] == "INFO"
    assert payload["logger"] == "kv_namespace.backends.redis"
    assert payload["message"] == "connecting redis backend to redis://x"
    assert "timestamp" in payload


def test_configure_logging_text_replaces_handlers(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("warning", "json")
    logger = configure_logging("warning", "text")

    assert len(logger.handlers) == 1
    logging.getLogger("kv_namespace.namespace").warning("hello")
    logging.getLogger("kv_namespace.namespace").info("hidden")

    err = capsys.readouterr().err
    assert " - kv_namespace.namespace - WARNING - hello" in err
    assert "hidden" not in err
