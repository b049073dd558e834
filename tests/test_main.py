import json

import httpx
import pytest
import respx

from linkpreview.main import build_parser, main, run_preview

LINK = "https://example.com/story"


def test_run_preview_prints_card_json(capsys: pytest.CaptureFixture[str]) -> None:
    args = build_parser().parse_args(["preview", f"shared {LINK}"])
    with respx.mock:
        respx.get(LINK).mock(return_value=httpx.Response(200, text="<title>CLI</title>"))
        exit_code = run_preview(args)

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["title"] == "CLI"
    assert payload["url"] == LINK


def test_run_preview_without_link(capsys: pytest.CaptureFixture[str]) -> None:
    args = build_parser().parse_args(["preview", "just words"])
    assert run_preview(args) == 0
    assert "No link found." in capsys.readouterr().out


def test_run_preview_reports_unavailable(capsys: pytest.CaptureFixture[str]) -> None:
    args = build_parser().parse_args(["preview", LINK])
    with respx.mock:
        respx.get(LINK).mock(return_value=httpx.Response(500))
        exit_code = run_preview(args)

    assert exit_code == 1
    assert "Preview unavailable: unexpected status: 500" in capsys.readouterr().out


def test_main_exits_with_run_status() -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["preview", "nothing to preview"])
    assert exc_info.value.code == 0


def test_main_without_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    main([])
    assert "preview" in capsys.readouterr().out
