"""
Package marker for source code under `src`.
It groups the department service, the user service, and their shared plumbing under one import path.
Most functionality lives in the sibling packages; this file intentionally stays lightweight.
"""
