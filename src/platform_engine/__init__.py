"""Platform Engine — detect and report the host OS and architecture.

Sub-package containing:
    identifiers  – raw platform queries and alias normalisation
    report       – assembles the report and renders it as text or a table
"""
