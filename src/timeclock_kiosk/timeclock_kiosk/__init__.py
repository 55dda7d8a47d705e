"""Timeclock Kiosk package.

This package is organized by feature modules (roster, identity, session, ...)
with a thin Flask controller layer on top of plain service/repository layers.
"""
