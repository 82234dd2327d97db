# /// script
# dependencies = ["pillow", "jinja2"]
# ///
"""
gallerygen: Build resized variants and a JSON manifest for a photo gallery site.

Usage:
    uv run --script gallerygen.py

Expects source photos under ./pics/<gallery>/[<event>/]<photo>.
Writes thumbnails/, medium/, originals/ and js/gallery-config.json under the
current directory. Set GALLERY_ENV=development for per-file output.
"""

import json
import os
import re
import shutil
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from functools import reduce
from pathlib import Path, PurePosixPath

from jinja2 import Environment
from PIL import Image, ImageDraw, ImageFont, ImageOps

_jinja_env = Environment(autoescape=True)
Template = _jinja_env.from_string

# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

SOURCE_DIR = Path("pics")
OUTPUT_DIR = Path(".")
MANIFEST_PATH = "js/gallery-config.json"
INDEX_PAGE = "gallery-index.html"
ORIGINALS_DIR = "originals"
MANIFEST_VERSION = "1.0"

IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp"}

BATCH_SIZE = 3      # images encoded concurrently
BATCH_PAUSE = 0.1   # seconds between batches, keeps peak memory flat

GENERAL_EVENT = "general"
CATEGORY_PREFIX = re.compile(r"^[a-z_]+_")

ORIENTATION_TAG = 0x0112
ROTATED_ORIENTATIONS = {5, 6, 7, 8}

WATERMARK_HEIGHT = 50
WATERMARK_FONT_SIZE = 30
WATERMARK_SCALE = 0.08
WATERMARK_MIN_WIDTH = 100
WATERMARK_MAX_WIDTH = 250
WATERMARK_MARGIN = 20
WATERMARK_OPACITY = 0.8

# Anything Pillow raises for a file it cannot decode or encode
ENCODE_ERRORS = (OSError, ValueError, Image.DecompressionBombError)


@dataclass(frozen=True)
class VariantSpec:
    """One derived JPEG: bounding box, fit mode and encoder quality."""
    name: str
    directory: str
    max_size: int
    quality: int
    fit: str = "inside"     # "inside" keeps aspect ratio, "cover" crops square
    watermark: bool = False


THUMBNAIL = VariantSpec("thumbnail", "thumbnails", 300, quality=80)
MEDIUM = VariantSpec("medium", "medium", 1200, quality=85, watermark=True)


class GalleryError(Exception):
    """Base class for errors that abort a run."""


class ConfigurationError(GalleryError):
    pass


class ManifestWriteError(GalleryError):
    pass


@dataclass(frozen=True)
class Config:
    source_dir: Path = SOURCE_DIR
    output_dir: Path = OUTPUT_DIR
    manifest_path: str = MANIFEST_PATH
    index_page: str = INDEX_PAGE
    thumbnail: VariantSpec = THUMBNAIL
    medium: VariantSpec = MEDIUM
    watermark_text: str | None = None
    infer_prefix_categories: bool = False
    write_index_page: bool = True
    batch_size: int = BATCH_SIZE
    batch_pause: float = BATCH_PAUSE
    verbose: bool = False

    def __post_init__(self):
        if self.thumbnail.watermark:
            raise ConfigurationError("Thumbnails are never watermarked")
        if self.batch_size < 1:
            raise ConfigurationError(f"batch_size must be at least 1, got {self.batch_size}")

    @classmethod
    def from_env(cls, environ=None) -> "Config":
        """Defaults, with GALLERY_ENV=development switching on verbose output."""
        environ = os.environ if environ is None else environ
        return cls(verbose=environ.get("GALLERY_ENV", "").lower() == "development")

    @property
    def variants(self) -> tuple[VariantSpec, ...]:
        return (self.thumbnail, self.medium)

    @property
    def manifest_file(self) -> Path:
        return self.output_dir / self.manifest_path

    @property
    def index_file(self) -> Path:
        return self.output_dir / self.index_page


# ---------------------------------------------------------------------------
# Step 1: Walk the source tree
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SourceImage:
    path: Path
    rel_path: str       # POSIX separators, relative to the scan root
    mtime: float
    extension: str


@dataclass(frozen=True)
class Placement:
    """Where a source lands in the manifest tree."""
    gallery: str
    event: str | None   # None for photos directly inside the gallery directory
    filename: str       # relative to the gallery directory


def walk_sources(root: Path) -> list[SourceImage]:
    """Find supported images below root, sorted by relative path."""
    if not root.is_dir():
        raise ConfigurationError(f"Source directory not found: {root}")

    found: list[SourceImage] = []
    _walk_dir(root, root, found)
    found.sort(key=lambda s: s.rel_path)
    return found


def _walk_dir(directory: Path, root: Path, found: list[SourceImage]):
    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        print(f"  Cannot read {directory}, skipping: {e}")
        return

    for entry in entries:
        if entry.name.startswith("."):
            continue
        if not _utf8_name(entry.name):
            print(f"  Cannot encode name {entry.name!r} in {directory} as UTF-8, skipping")
            continue
        # Symlinked directories are not followed
        if entry.is_dir() and not entry.is_symlink():
            _walk_dir(entry, root, found)
            continue
        ext = entry.suffix.lower()
        if ext not in IMAGE_EXTENSIONS or not entry.is_file():
            continue
        try:
            st = entry.stat()
        except OSError as e:
            print(f"  Cannot stat {entry}, skipping: {e}")
            continue
        found.append(SourceImage(
            path=entry.absolute(),
            rel_path=entry.relative_to(root).as_posix(),
            mtime=st.st_mtime,
            extension=ext,
        ))


def _utf8_name(name: str) -> bool:
    # Undecodable bytes arrive as lone surrogates, which the manifest cannot hold
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def classify(source: SourceImage, infer_prefix: bool = False) -> Placement | None:
    """Map a source to gallery/event, or None if it sits directly under the root.

    The first path segment names the gallery and the second, when it is a
    directory, the event. With infer_prefix, a lowercase filename prefix such
    as ``market_`` in ``market_IMG_1.jpg`` names the event when no directory
    does.
    """
    parts = source.rel_path.split("/")
    if len(parts) < 2:
        return None

    gallery = parts[0]
    event = parts[1] if len(parts) > 2 else None
    if event is None and infer_prefix:
        m = CATEGORY_PREFIX.match(parts[-1])
        if m:
            event = m.group(0).rstrip("_") or None
    return Placement(gallery=gallery, event=event, filename="/".join(parts[1:]))


def humanize(text: str) -> str:
    """'saturday_market' -> 'Saturday Market', 'nightSky' -> 'Night Sky'."""
    text = re.sub(r"[_-]+", " ", text)
    text = re.sub(r"([a-z])([A-Z])", r"\1 \2", text)
    return " ".join(w[:1].upper() + w[1:] for w in text.split())


def title_from_filename(filename: str) -> str:
    return humanize(PurePosixPath(filename).stem)


# ---------------------------------------------------------------------------
# Step 2: Generate resized variants
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ImageInfo:
    width: int
    height: int
    orientation: int


@dataclass(frozen=True)
class PhotoRecord:
    filename: str
    title: str
    date: str
    width: int | None
    height: int | None
    orientation: int
    original: str
    thumbnail: str
    medium: str


@dataclass(frozen=True)
class ProcessedPhoto:
    placement: Placement
    record: PhotoRecord
    regenerated: int = 0    # files written this run
    fallback: bool = False  # at least one variant is a verbatim copy


@dataclass(frozen=True)
class FileFailure:
    source: SourceImage
    reason: str


def variant_rel_path(spec: VariantSpec, rel_path: str) -> str:
    return f"{spec.directory}/{PurePosixPath(rel_path).with_suffix('.jpg')}"


def original_rel_path(rel_path: str) -> str:
    return f"{ORIGINALS_DIR}/{rel_path}"


def claim_outputs(items: list[tuple[SourceImage, Placement]], config: Config):
    """Split items into those that own their variant paths and clashes.

    Sources differing only in extension (a.jpg, a.png) share a variant path;
    the first in walk order keeps it and the rest become FileFailure.
    """
    owners: dict[str, SourceImage] = {}
    kept: list[tuple[SourceImage, Placement]] = []
    clashes: list[FileFailure] = []
    for source, placement in items:
        rel = variant_rel_path(config.thumbnail, source.rel_path)
        owner = owners.setdefault(rel, source)
        if owner is source:
            kept.append((source, placement))
        else:
            print(f"  Skipped {source.rel_path}: same output name as {owner.rel_path}")
            clashes.append(FileFailure(source, f"same output name as {owner.rel_path}"))
    return kept, clashes


def needs_update(src_mtime: float, dst: Path) -> bool:
    """True when dst is missing or older than the source."""
    try:
        return src_mtime > dst.stat().st_mtime
    except FileNotFoundError:
        return True


def probe_image(path: Path) -> ImageInfo | None:
    """Read upright dimensions and EXIF orientation, or None if undecodable."""
    try:
        with Image.open(path) as img:
            width, height = img.size
            orientation = img.getexif().get(ORIENTATION_TAG, 1)
    except (FileNotFoundError, PermissionError):
        raise
    except ENCODE_ERRORS:
        return None

    if orientation in ROTATED_ORIENTATIONS:
        width, height = height, width
    return ImageInfo(width, height, orientation)


def _flatten(img: Image.Image) -> Image.Image:
    """Convert to RGB, putting transparent areas on white."""
    if img.mode in ("RGBA", "LA", "PA") or "transparency" in img.info:
        img = img.convert("RGBA")
        background = Image.new("RGB", img.size, "white")
        background.paste(img, mask=img.getchannel("A"))
        return background
    return img.convert("RGB")


def _crop_square(img: Image.Image) -> Image.Image:
    w, h = img.size
    side = min(w, h)
    left = (w - side) // 2
    top = (h - side) // 2
    return img.crop((left, top, left + side, top + side))


def render_variant(src: Path, dst: Path, spec: VariantSpec, watermark_text: str | None = None):
    """Write one JPEG variant, auto-rotated and never enlarged."""
    with Image.open(src) as img:
        img = _flatten(ImageOps.exif_transpose(img))

    if spec.fit == "cover":
        img = _crop_square(img)
    img.thumbnail((spec.max_size, spec.max_size), Image.LANCZOS)

    if spec.watermark and watermark_text:
        img = apply_watermark(img, watermark_text)

    dst.parent.mkdir(parents=True, exist_ok=True)
    img.save(dst, "JPEG", quality=spec.quality, progressive=True)


def copy_fallback(src: Path, dst: Path):
    """Stand-in for a variant the encoder could not produce."""
    dst.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(src, dst)


def watermark_width(image_width: int) -> int:
    return min(WATERMARK_MAX_WIDTH, max(WATERMARK_MIN_WIDTH, round(image_width * WATERMARK_SCALE)))


def watermark_position(image_size: tuple[int, int], mark_size: tuple[int, int]) -> tuple[int, int]:
    """Bottom-right corner inset by the margin, clamped to the image."""
    left = image_size[0] - mark_size[0] - WATERMARK_MARGIN
    top = image_size[1] - mark_size[1] - WATERMARK_MARGIN
    return max(0, left), max(0, top)


def render_watermark(text: str) -> Image.Image:
    """White label with a faint dark outline on a transparent canvas."""
    width = max(200, len(text) * 20)
    overlay = Image.new("RGBA", (width, WATERMARK_HEIGHT), (0, 0, 0, 0))
    draw = ImageDraw.Draw(overlay)
    font = ImageFont.load_default(size=WATERMARK_FONT_SIZE)

    left, top, right, bottom = draw.textbbox((0, 0), text, font=font, stroke_width=1)
    x = (width - (right - left)) / 2 - left
    y = (WATERMARK_HEIGHT - (bottom - top)) / 2 - top
    draw.text((x, y), text, font=font, fill=(255, 255, 255, 255),
              stroke_width=1, stroke_fill=(0, 0, 0, 77))
    return overlay


def apply_watermark(img: Image.Image, text: str) -> Image.Image:
    mark = render_watermark(text)

    target = watermark_width(img.width)
    if mark.width > target:
        mark = mark.resize((target, max(1, round(mark.height * target / mark.width))), Image.LANCZOS)

    alpha = mark.getchannel("A").point(lambda a: round(a * WATERMARK_OPACITY))
    mark.putalpha(alpha)

    left, top = watermark_position(img.size, mark.size)
    mark = mark.crop((0, 0, min(mark.width, img.width - left), min(mark.height, img.height - top)))

    base = img.convert("RGBA")
    base.alpha_composite(mark, (left, top))
    return base.convert("RGB")


def process_source(source: SourceImage, placement: Placement, config: Config) -> ProcessedPhoto | FileFailure:
    """Bring one source's variants up to date and describe it.

    Unreadable files come back as FileFailure; encoder problems fall back to
    copying the original bytes and still yield a record.
    """
    try:
        return _process_source(source, placement, config)
    except OSError as e:
        print(f"  Skipped {source.rel_path}: {e}")
        return FileFailure(source, str(e))


def _process_source(source: SourceImage, placement: Placement, config: Config) -> ProcessedPhoto:
    info = probe_image(source.path)
    if info is None:
        print(f"  Cannot decode {source.rel_path}, copying original bytes")

    written = 0
    fallback = False
    for spec in config.variants:
        dst = config.output_dir / variant_rel_path(spec, source.rel_path)
        if not needs_update(source.mtime, dst):
            continue
        if info is None:
            copy_fallback(source.path, dst)
            fallback = True
        else:
            try:
                render_variant(source.path, dst, spec, config.watermark_text)
            except ENCODE_ERRORS as e:
                print(f"  {spec.name} failed for {source.rel_path}: {e}")
                copy_fallback(source.path, dst)
                fallback = True
        written += 1
        if config.verbose:
            print(f"    {spec.name}: {dst}")

    original_dst = config.output_dir / original_rel_path(source.rel_path)
    if needs_update(source.mtime, original_dst):
        original_dst.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source.path, original_dst)
        written += 1

    date = datetime.fromtimestamp(source.mtime, timezone.utc)
    record = PhotoRecord(
        filename=placement.filename,
        title=title_from_filename(placement.filename),
        date=date.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        width=info.width if info else None,
        height=info.height if info else None,
        orientation=info.orientation if info else 1,
        original=original_rel_path(source.rel_path),
        thumbnail=variant_rel_path(config.thumbnail, source.rel_path),
        medium=variant_rel_path(config.medium, source.rel_path),
    )
    return ProcessedPhoto(placement, record, regenerated=written, fallback=fallback)


def process_all(items: list[tuple[SourceImage, Placement]], config: Config) -> list[ProcessedPhoto | FileFailure]:
    """Process sources in fixed-size batches, results in input order."""
    results: list[ProcessedPhoto | FileFailure] = []
    total = len(items)
    size = config.batch_size

    with ThreadPoolExecutor(max_workers=size) as pool:
        for start in range(0, total, size):
            batch = items[start:start + size]
            results.extend(pool.map(lambda item: process_source(item[0], item[1], config), batch))

            done = len(results)
            if done // 100 > start // 100 or done == total:
                print(f"  [{done}/{total}] processed")
            if done < total and config.batch_pause:
                time.sleep(config.batch_pause)

    return results


# ---------------------------------------------------------------------------
# Step 3: Build the manifest tree
# ---------------------------------------------------------------------------

# gallery id -> event id (None for direct photos) -> records in arrival order
Tree = dict[str, dict[str | None, tuple[PhotoRecord, ...]]]


def add_photo(tree: Tree, placement: Placement, record: PhotoRecord) -> Tree:
    """Return a new tree with record added; a record with the same filename is replaced."""
    events = tree.get(placement.gallery, {})
    photos = tuple(p for p in events.get(placement.event, ()) if p.filename != record.filename)
    return {**tree, placement.gallery: {**events, placement.event: photos + (record,)}}


def build_tree(results: list[ProcessedPhoto | FileFailure]) -> Tree:
    done = [r for r in results if isinstance(r, ProcessedPhoto)]
    return reduce(lambda tree, r: add_photo(tree, r.placement, r.record), done, {})


def sort_photos(photos) -> list[PhotoRecord]:
    """Newest first; filename breaks ties so output is reproducible."""
    by_name = sorted(photos, key=lambda p: p.filename)
    return sorted(by_name, key=lambda p: p.date, reverse=True)


def describe(count: int) -> str:
    return f"{count} photo" if count == 1 else f"{count} photos"


def _node(node_id: str, photos) -> dict:
    ordered = sort_photos(photos)
    return {
        "id": node_id,
        "title": humanize(node_id),
        "description": describe(len(ordered)),
        "photoCount": len(ordered),
        "images": [asdict(p) for p in ordered],
    }


def finalize_gallery(gallery_id: str, events: dict) -> dict:
    """Flat layout unless some photo belongs to an event."""
    if set(events) == {None}:
        node = _node(gallery_id, events[None])
        images = node.pop("images")
        return {**node, "layout": "flat", "images": images}

    merged: dict[str, list[PhotoRecord]] = {}
    for event_id, photos in events.items():
        merged.setdefault(event_id or GENERAL_EVENT, []).extend(photos)

    nodes = {event_id: _node(event_id, merged[event_id]) for event_id in sorted(merged)}
    count = sum(n["photoCount"] for n in nodes.values())
    return {
        "id": gallery_id,
        "title": humanize(gallery_id),
        "description": describe(count),
        "photoCount": count,
        "layout": "events",
        "events": nodes,
    }


def finalize_manifest(tree: Tree, stats: dict, generated_at: datetime) -> dict:
    return {
        "version": MANIFEST_VERSION,
        "lastGenerated": generated_at.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        "stats": stats,
        "galleries": {gid: finalize_gallery(gid, tree[gid]) for gid in sorted(tree) if tree[gid]},
    }


def _size_mb(total_bytes: int) -> str:
    return f"{total_bytes / 1024 / 1024:.2f}"


def collect_stats(tree: Tree, output_dir: Path) -> dict:
    """Photo count and on-disk size of each output kind."""
    sizes = {"original": 0, "thumbnail": 0, "medium": 0}
    total = 0
    for events in tree.values():
        for photos in events.values():
            for record in photos:
                total += 1
                for kind in sizes:
                    try:
                        sizes[kind] += (output_dir / getattr(record, kind)).stat().st_size
                    except FileNotFoundError:
                        pass
    return {
        "totalImages": total,
        "originalSizeMB": _size_mb(sizes["original"]),
        "thumbnailSizeMB": _size_mb(sizes["thumbnail"]),
        "mediumSizeMB": _size_mb(sizes["medium"]),
    }


# ---------------------------------------------------------------------------
# Step 4: Write the manifest
# ---------------------------------------------------------------------------

def write_manifest(manifest: dict, path: Path):
    """Pretty-print manifest to path, replacing any previous file.

    The text is encoded before the file is opened, so a manifest that cannot
    be serialized leaves the previous file untouched.
    """
    try:
        data = (json.dumps(manifest, indent=2, ensure_ascii=False) + "\n").encode("utf-8")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except (OSError, UnicodeError) as e:
        raise ManifestWriteError(f"Could not write manifest {path}: {e}") from e


# ---------------------------------------------------------------------------
# Step 5: Plain HTML index
# ---------------------------------------------------------------------------

INDEX_CSS = """\
body {
  margin: 0; padding: 24px;
  font-family: "Inter", system-ui, -apple-system, sans-serif;
  font-size: 15px; line-height: 1.6;
  background: #0e0e0e; color: #c8c8c8;
}
a { color: #7db8e0; text-decoration: none; }
h1 { font-size: 1.5em; font-weight: 500; margin: 0 0 4px; }
h2 { font-size: 1.1em; font-weight: 500; color: #999; margin: 24px 0 8px; }
h3 { font-size: 0.95em; font-weight: 500; color: #777; margin: 12px 0 6px; }
.subtitle { font-size: 0.88em; color: #777; margin-bottom: 24px; }
.grid {
  display: grid;
  grid-template-columns: repeat(auto-fill, minmax(160px, 1fr));
  gap: 3px;
}
.grid a { display: block; aspect-ratio: 1; overflow: hidden; border-radius: 2px; }
.grid img { width: 100%; height: 100%; object-fit: cover; display: block; }
"""

INDEX_TEMPLATE = Template("""\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>Galleries</title>
<style>
{{ css }}</style>
</head>
<body>
<h1>Galleries</h1>
<p class="subtitle">{{ stats.totalImages }} photos in {{ sections|length }} galleries &middot; generated {{ generated }}</p>
{% for gallery, groups in sections %}
<section id="{{ gallery.id }}">
<h2>{{ gallery.title }} <span class="subtitle">{{ gallery.description }}</span></h2>
{% for title, images in groups %}
{% if title %}<h3>{{ title }}</h3>{% endif %}
<div class="grid">
{% for photo in images %}<a href="{{ photo.medium }}" title="{{ photo.title }}"><img src="{{ photo.thumbnail }}" alt="{{ photo.title }}" loading="lazy"></a>
{% endfor %}
</div>
{% endfor %}
</section>
{% endfor %}
</body>
</html>
""")


def index_sections(manifest: dict) -> list[tuple[dict, list[tuple[str | None, list[dict]]]]]:
    """Pair each gallery with its (event title, images) groups."""
    sections = []
    for gallery in manifest["galleries"].values():
        if gallery["layout"] == "flat":
            groups = [(None, gallery["images"])]
        else:
            groups = [(event["title"], event["images"]) for event in gallery["events"].values()]
        sections.append((gallery, groups))
    return sections


def render_index_page(manifest: dict, path: Path):
    html = INDEX_TEMPLATE.render(
        css=INDEX_CSS,
        stats=manifest["stats"],
        generated=manifest["lastGenerated"],
        sections=index_sections(manifest),
    )
    try:
        data = html.encode("utf-8")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except (OSError, UnicodeError) as e:
        raise ManifestWriteError(f"Could not write index page {path}: {e}") from e


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

@dataclass
class RunSummary:
    manifest: dict
    processed: int = 0
    regenerated: int = 0
    failed: int = 0
    skipped: list[FileFailure] = field(default_factory=list)
    unassigned: list[SourceImage] = field(default_factory=list)


def run(config: Config) -> RunSummary:
    print("Step 1: Scanning sources...")
    sources = walk_sources(config.source_dir)
    items: list[tuple[SourceImage, Placement]] = []
    unassigned: list[SourceImage] = []
    for source in sources:
        placement = classify(source, config.infer_prefix_categories)
        if placement is None:
            print(f"  Ignoring {source.rel_path}: not inside a gallery directory")
            unassigned.append(source)
        else:
            items.append((source, placement))
    print(f"  Found {len(items)} images in {len({p.gallery for _, p in items})} galleries")
    items, clashes = claim_outputs(items, config)

    print("Step 2: Processing images (thumbnails + medium)...")
    results = process_all(items, config)
    processed = [r for r in results if isinstance(r, ProcessedPhoto)]
    skipped = clashes + [r for r in results if isinstance(r, FileFailure)]

    print("Step 3: Building manifest...")
    tree = build_tree(results)
    manifest = finalize_manifest(tree, collect_stats(tree, config.output_dir), datetime.now(timezone.utc))

    print("Step 4: Writing manifest...")
    write_manifest(manifest, config.manifest_file)
    print(f"  Wrote {config.manifest_file}")

    if config.write_index_page:
        print("Step 5: Rendering index page...")
        render_index_page(manifest, config.index_file)
        print(f"  Wrote {config.index_file}")

    summary = RunSummary(
        manifest=manifest,
        processed=len(processed),
        regenerated=sum(1 for r in processed if r.regenerated),
        failed=sum(1 for r in processed if r.fallback),
        skipped=skipped,
        unassigned=unassigned,
    )
    print_summary(summary)
    print(f"Run: python3 -m http.server -d {config.output_dir} 8000")
    return summary


def print_summary(summary: RunSummary):
    stats = summary.manifest["stats"]
    print(f"\nDone! Processed {summary.processed} images ({summary.regenerated} updated)")
    if summary.failed:
        print(f"  {summary.failed} images could not be encoded; originals copied instead")
    if summary.skipped:
        print(f"  {len(summary.skipped)} files skipped:")
        for failure in summary.skipped:
            print(f"    {failure.source.rel_path}: {failure.reason}")
    if summary.unassigned:
        print(f"  {len(summary.unassigned)} files outside any gallery ignored")
    print(f"  Originals: {stats['originalSizeMB']} MB")
    print(f"  Thumbnails: {stats['thumbnailSizeMB']} MB")
    print(f"  Medium: {stats['mediumSizeMB']} MB")


def main() -> int:
    config = Config.from_env()
    try:
        run(config)
    except GalleryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
