"""
End-to-end tests running the autodoc command as a separate process.
"""
