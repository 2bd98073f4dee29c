import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterable, List, Optional

log = logging.getLogger(__name__)


def source_from_path(p: Path, base: Optional[Path] = None) -> str:
    """
    Label for a document in exported rows: path relative to base when possible.
    """
    if base is not None:
        try:
            return p.relative_to(base).as_posix()
        except ValueError:
            pass
    return p.name


def find_xml_files(paths: Iterable[Path]) -> List[Path]:
    """
    Files are kept as given, directories are searched for *.xml (sorted).
    """
    out: List[Path] = []

    for p in paths:
        if p.is_dir():
            out.extend(sorted(f for f in p.rglob("*.xml") if f.is_file()))
        elif p.exists():
            out.append(p)
        else:
            log.warning("No such file or directory: %s", p)

    return out


def load_xml(path: Path) -> Optional[ET.Element]:
    try:
        return ET.parse(path).getroot()
    except (ET.ParseError, OSError) as e:
        log.warning("Skipping %s (%s)", path, e)
        return None
