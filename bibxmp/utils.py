from pathlib import Path
from typing import Iterable, List, Union


def find_format(file_path: Path):
    return file_path.suffix.lstrip('.').lower()


def is_pdf(file_path: Path) -> bool:
    return file_path.is_file() and find_format(file_path) == "pdf"


def expand_pdf_paths(paths: Iterable[Union[str, Path]]) -> List[Path]:
    """
    Resolve a mix of files and directories into the PDF files they denote.

    Files are kept as given (even without a .pdf suffix) so that reading them
    reports a proper error; directories are searched recursively for PDFs.
    """
    files = []
    for p in paths:
        p = Path(p)

        if p.is_dir():
            files.extend(sorted(f for f in p.rglob("*") if is_pdf(f))) # recursive search across multiple levels
        else:
            files.append(p)
    return files
