# topmark:header:start
#
#   project      : ConfigDocs
#   file         : __init__.py
#   file_relpath : src/configdocs/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ConfigDocs contributors
#
# topmark:header:end

"""Click-based command-line interface for ConfigDocs."""
