import pytest
import sys
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import modmod
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


# Common test fixtures
@pytest.fixture
def sample_image(tmp_path: Path):
    """Create a simple test image."""
    img = Image.new("RGB", (200, 100), color="white")
    img_path = tmp_path / "track" / "images" / "diagram.png"
    img_path.parent.mkdir(parents=True, exist_ok=True)
    img.save(img_path)
    return img_path


@pytest.fixture
def write_doc(tmp_path: Path):
    """Return a helper writing a UTF-8 document under tmp_path/track."""
    root = tmp_path / "track"

    def _write(relative: str, text: str) -> Path:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    """Output root for renders (created by the renderer)."""
    return tmp_path / "out"
