"""Click plumbing for the nextday entry point.

``_context`` carries settings and turns a ServiceResult into output and an
exit code.
"""
