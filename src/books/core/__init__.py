# ABOUTME: Formatting and external-collaborator helpers that sit outside the database layer.
# ABOUTME: Author-list joining, date display, HTML rendering, and website rebuilds.
