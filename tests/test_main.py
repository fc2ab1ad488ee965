import json

import pytest

from kv_namespace.__main__ import main
from kv_namespace._version import version
from kv_namespace.config import Settings


pytestmark = pytest.mark.usefixtures("restore_package_logger")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in Settings.model_fields:
        monkeypatch.delenv(f"KV_NAMESPACE_{name.upper()}", raising=False)


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == version


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    main([])
    assert "usage: kv_namespace" in capsys.readouterr().out


def test_list_command_prints_page_as_json(capsys: pytest.CaptureFixture[str]) -> None:
    main(["list", "--prefix", "fruit:", "--limit", "5"])
    assert json.loads(capsys.readouterr().out) == {"keys": [], "list_complete": True}
