from .validator import validate_catalog, pretty_summary
from .io import read_lines, write_lines, load_challenges, load_submissions

__all__ = ["validate_catalog", "pretty_summary", "load_challenges", "load_submissions"]
