"""Run with:
    python -m localebuild <localizations-dir> <output-dir>
"""

from localebuild.main import run

run()
