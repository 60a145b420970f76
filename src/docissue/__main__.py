"""Entry point for running docissue as a module.

Usage:
    python -m docissue [options] command

Example:
    python -m docissue demo
    python -m docissue issue enrollment --id UCC-0107 --name "Laura Gómez" --program Derecho --gpa 3.8
"""

from docissue.cli import cli

if __name__ == "__main__":
    cli()
