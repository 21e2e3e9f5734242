# topmark:header:start
#
#   project      : ConfigDocs
#   file         : __main__.py
#   file_relpath : src/configdocs/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""Module entry point for running ConfigDocs via ``python -m configdocs``.

Delegates to [`configdocs.cli.main.cli`][], the same entry point as the
``configdocs`` console script.

Examples:
    Render the documentation of a record::

        python -m configdocs render myapp.settings:Config
"""

from __future__ import annotations

from configdocs.cli.main import cli

if __name__ == "__main__":
    cli()
