"""
Main entry point when running the package with `python -m automation_helper`
"""

from .cli import run

if __name__ == "__main__":
    run()
