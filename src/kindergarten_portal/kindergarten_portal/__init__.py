"""Kindergarten Portal package.

Organized by feature modules (directory, absences, attendance) with a thin
Flask controller layer over service/repository layers.
"""
