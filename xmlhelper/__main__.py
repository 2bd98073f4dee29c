import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from xmlhelper.export.excel import export_to_excel
from xmlhelper.models import ElementRow, LeafRow
from xmlhelper.node import find_path, name_of, split_path
from xmlhelper.rows import element_rows, leaf_rows
from xmlhelper.util.fs import find_xml_files, load_xml, source_from_path

log = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="xmlhelper",
        description="Export the leaf elements of XML documents to a workbook",
    )
    ap.add_argument("paths", nargs="+", help="XML files or directories")
    ap.add_argument("--out", default="xml_leaves.xlsx")
    ap.add_argument("--path", default="", help="dotted path to descend first, e.g. macros.macro")
    ap.add_argument("--include-elements", action="store_true")
    ap.add_argument("--log-level", default="INFO")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(levelname)s %(name)s: %(message)s",
    )

    files = find_xml_files(Path(p) for p in args.paths)
    segments = split_path(args.path)
    cwd = Path.cwd()

    leaves: List[LeafRow] = []
    all_elements: List[ElementRow] = []
    documents = 0

    for f in files:
        root = load_xml(f)
        if root is None:
            continue
        documents += 1
        source = source_from_path(f.resolve(), cwd)

        chain = find_path(root, segments)
        if chain is None:
            log.warning("%s: path %r not found", source, args.path)
            continue

        start = chain[-1]
        prefix = [name_of(n) for n in chain]

        leaves.extend(leaf_rows(source, start, prefix))
        if args.include_elements:
            all_elements.extend(element_rows(source, start, prefix))

        log.debug("%s: %d leaves so far", source, len(leaves))

    if not documents:
        log.error("No XML document could be read")
        return 1

    export_to_excel(
        Path(args.out),
        leaves,
        all_elements if args.include_elements else None,
    )
    log.info("Wrote %d leaves from %d documents to %s", len(leaves), documents, args.out)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
