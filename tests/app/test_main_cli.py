from __future__ import annotations

import os
from pathlib import Path

import pytest

from music_exporter import main as main_module
from music_exporter.app import ExportRequest
from music_exporter.config import MissingConfigError
from music_exporter.domain.errors import TransportError
from music_exporter.domain.platforms import Platform


def _capture_export(monkeypatch: pytest.MonkeyPatch) -> list[ExportRequest]:
    captured: list[ExportRequest] = []

    def fake_export(request: ExportRequest, **_: object) -> None:
        captured.append(request)

    monkeypatch.setattr(main_module, "export_music", fake_export)
    return captured


def test_main_cli_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = _capture_export(monkeypatch)

    main_module.main(["--music-file", "music.json", "--platform", "deezer"])

    (request,) = captured
    assert request.music_file == Path("music.json")
    assert request.platforms == (Platform.DEEZER,)
    assert request.remove_duplicates is True
    assert request.sort is True
    assert request.youtube_playlist_id is None
    assert request.callback_port is None


def test_main_cli_with_flags(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = _capture_export(monkeypatch)

    main_module.main(
        [
            "--music-file",
            "out/music.json",
            "--platform",
            "spotify",
            "youtube",
            "--platform",
            "deezer",
            "--ytb-playlist-id",
            "PL123",
            "--keep-duplicates",
            "--no-sort",
            "--port",
            "8765",
        ]
    )

    (request,) = captured
    assert request.platforms == (Platform.SPOTIFY, Platform.YOUTUBE, Platform.DEEZER)
    assert request.youtube_playlist_id == "PL123"
    assert request.remove_duplicates is False
    assert request.sort is False
    assert request.callback_port == 8765


def test_main_cli_rejects_unknown_platform(monkeypatch: pytest.MonkeyPatch) -> None:
    _capture_export(monkeypatch)

    with pytest.raises(SystemExit) as excinfo:
        main_module.main(["--music-file", "music.json", "--platform", "tidal"])

    assert excinfo.value.code == 2


def test_main_cli_requires_music_file(monkeypatch: pytest.MonkeyPatch) -> None:
    _capture_export(monkeypatch)

    with pytest.raises(SystemExit) as excinfo:
        main_module.main(["--platform", "deezer"])

    assert excinfo.value.code == 2


def test_main_cli_missing_env_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    captured = _capture_export(monkeypatch)

    with pytest.raises(SystemExit) as excinfo:
        main_module.main(
            [
                "--music-file",
                "music.json",
                "--platform",
                "deezer",
                "--env-file",
                str(tmp_path / "missing.env"),
            ]
        )

    assert excinfo.value.code == 2
    assert captured == []


def test_main_cli_loads_env_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("MUSIC_EXPORTER_DEEZER_USER_ID=from-file\n")
    seen: list[str | None] = []

    def fake_export(_request: ExportRequest, **_: object) -> None:
        seen.append(os.getenv("MUSIC_EXPORTER_DEEZER_USER_ID"))

    monkeypatch.setattr(main_module, "export_music", fake_export)
    # registered so the value loaded from the file is dropped on teardown
    monkeypatch.setenv("MUSIC_EXPORTER_DEEZER_USER_ID", "")
    monkeypatch.delenv("MUSIC_EXPORTER_DEEZER_USER_ID")

    main_module.main(
        ["--music-file", "music.json", "--platform", "deezer", "--env-file", str(env_file)]
    )

    assert seen == ["from-file"]


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (MissingConfigError("Missing configuration for: X"), 2),
        (TransportError("Deezer: failed to get favourite tracks (500)", status_code=500), 1),
    ],
)
def test_main_cli_exit_codes(
    monkeypatch: pytest.MonkeyPatch,
    error: Exception,
    code: int,
) -> None:
    def failing_export(*_: object, **__: object) -> None:
        raise error

    monkeypatch.setattr(main_module, "export_music", failing_export)

    with pytest.raises(SystemExit) as excinfo:
        main_module.main(["--music-file", "music.json", "--platform", "deezer"])

    assert excinfo.value.code == code
