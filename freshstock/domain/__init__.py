"""
Domain values: immutable entity snapshots, partial-update commands, report
rows and the client-facing messages shared by repositories and services.
"""
