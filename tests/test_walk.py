"""Tests for source discovery, classification and title derivation."""

import os
from pathlib import Path

import pytest

from gallerygen import (
    Config,
    ConfigurationError,
    MEDIUM,
    Placement,
    SourceImage,
    classify,
    humanize,
    title_from_filename,
    walk_sources,
)
from tests.helpers import byte_filenames, write_image, write_raw_name


def _source(rel_path: str) -> SourceImage:
    return SourceImage(path=Path("/pics") / rel_path, rel_path=rel_path, mtime=0.0, extension=".jpg")


class TestWalkSources:
    """Test recursive discovery of supported images."""

    def test_missing_root_is_configuration_error(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            walk_sources(tmp_path / "nope")

    def test_root_must_be_directory(self, tmp_path):
        target = tmp_path / "file.jpg"
        target.write_bytes(b"")
        with pytest.raises(ConfigurationError):
            walk_sources(target)

    def test_finds_supported_extensions_case_insensitive(self, source_dir):
        for name in ["a.jpg", "b.JPEG", "c.png", "d.gif", "e.WebP"]:
            (source_dir / "gallery" / name).parent.mkdir(exist_ok=True)
            (source_dir / "gallery" / name).write_bytes(b"x")

        found = walk_sources(source_dir)

        assert [s.rel_path for s in found] == [
            "gallery/a.jpg", "gallery/b.JPEG", "gallery/c.png", "gallery/d.gif", "gallery/e.WebP",
        ]
        assert {s.extension for s in found} == {".jpg", ".jpeg", ".png", ".gif", ".webp"}

    def test_skips_unsupported_and_hidden(self, source_dir):
        gallery = source_dir / "gallery"
        gallery.mkdir()
        for name in ["notes.txt", "raw.cr2", ".hidden.jpg", "movie.mp4"]:
            (gallery / name).write_bytes(b"x")
        (gallery / ".cache").mkdir()
        (gallery / ".cache" / "inside.jpg").write_bytes(b"x")
        (gallery / "keep.jpg").write_bytes(b"x")

        assert [s.rel_path for s in walk_sources(source_dir)] == ["gallery/keep.jpg"]

    def test_recurses_and_records_metadata(self, source_dir):
        path = write_image(source_dir / "events" / "market" / "day1" / "shot.jpg")

        [found] = walk_sources(source_dir)

        assert found.rel_path == "events/market/day1/shot.jpg"
        assert found.path == path.absolute()
        assert found.mtime == path.stat().st_mtime

    def test_unreadable_directory_is_skipped(self, source_dir, monkeypatch, capsys):
        (source_dir / "ok").mkdir()
        (source_dir / "ok" / "a.jpg").write_bytes(b"x")
        locked = source_dir / "locked"
        locked.mkdir()
        (locked / "b.jpg").write_bytes(b"x")

        real_iterdir = Path.iterdir

        def iterdir(self):
            if self == locked:
                raise PermissionError(13, "Permission denied", str(self))
            return real_iterdir(self)

        monkeypatch.setattr(Path, "iterdir", iterdir)

        found = walk_sources(source_dir)

        assert [s.rel_path for s in found] == ["ok/a.jpg"]
        assert "Cannot read" in capsys.readouterr().out

    @byte_filenames
    def test_non_utf8_names_are_skipped(self, source_dir, capsys):
        write_image(source_dir / "nature" / "ok.jpg")
        write_raw_name(source_dir / "nature", b"caf\xe9.jpg")
        write_raw_name(source_dir / os.fsdecode(b"r\xe9union"), b"inside.jpg")

        found = walk_sources(source_dir)

        assert [s.rel_path for s in found] == ["nature/ok.jpg"]
        assert capsys.readouterr().out.count("Cannot encode name") == 2


class TestClassify:
    """Test gallery/event placement."""

    def test_root_level_file_has_no_gallery(self):
        assert classify(_source("stray.jpg")) is None

    def test_direct_gallery_photo(self):
        assert classify(_source("nature/sample_1.jpg")) == Placement("nature", None, "sample_1.jpg")

    def test_event_from_directory(self):
        placement = classify(_source("events/market/day1/shot.jpg"))
        assert placement == Placement("events", "market", "market/day1/shot.jpg")

    def test_prefix_inference_is_opt_in(self):
        assert classify(_source("events/bubble_IMG_6738.jpg")).event is None
        assert classify(_source("events/bubble_IMG_6738.jpg"), infer_prefix=True).event == "bubble"

    def test_prefix_inference_multiword(self):
        placement = classify(_source("events/saturday_market_IMG_1.jpg"), infer_prefix=True)
        assert placement.event == "saturday_market"

    def test_directory_event_wins_over_prefix(self):
        placement = classify(_source("events/market/bubble_IMG_1.jpg"), infer_prefix=True)
        assert placement.event == "market"

    def test_no_prefix_match(self):
        assert classify(_source("events/IMG_1.jpg"), infer_prefix=True).event is None


class TestTitles:
    """Test filename and identifier humanizing."""

    @pytest.mark.parametrize(
        "filename,expected",
        [
            ("my_cool-Photo.JPG", "My Cool Photo"),
            ("sample_1.jpg", "Sample 1"),
            ("nightSkyOver-lake.png", "Night Sky Over Lake"),
            ("IMG_6738.JPG", "IMG 6738"),
            ("market/day1/last__shot.jpg", "Last Shot"),
        ],
    )
    def test_title_from_filename(self, filename, expected):
        assert title_from_filename(filename) == expected

    def test_humanize_identifier(self):
        assert humanize("saturday_market") == "Saturday Market"
        assert humanize("general") == "General"


class TestConfig:
    """Test configuration defaults and validation."""

    def test_defaults(self):
        config = Config()
        assert config.source_dir == Path("pics")
        assert config.manifest_file == Path("js/gallery-config.json")
        assert config.batch_size == 3
        assert config.verbose is False

    def test_verbose_from_env(self):
        assert Config.from_env({"GALLERY_ENV": "development"}).verbose is True
        assert Config.from_env({"GALLERY_ENV": "production"}).verbose is False
        assert Config.from_env({}).verbose is False

    def test_thumbnail_cannot_be_watermarked(self):
        with pytest.raises(ConfigurationError):
            Config(thumbnail=MEDIUM)

    def test_batch_size_must_be_positive(self):
        with pytest.raises(ConfigurationError):
            Config(batch_size=0)
