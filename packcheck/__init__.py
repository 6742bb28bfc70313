from .models import ManifestFile, Message, ValidationReport
from .loader import load_mod_set
from .validator import run_checks
from .report import print_summary

__all__ = ["ManifestFile", "Message", "ValidationReport", "load_mod_set", "run_checks", "print_summary"]
