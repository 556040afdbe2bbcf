import sys

from html_semantic_diff.cli import run

sys.exit(run())
