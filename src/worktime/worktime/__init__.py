"""Worktime package.

Personal work-time and leave accounting engine, organized by feature modules
(events, templates, summaries, ledger, shifts) with JSON-file repositories,
plain service classes and a thin Flask controller layer.
"""
