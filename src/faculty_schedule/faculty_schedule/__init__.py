"""Faculty Schedule package.

Organized by feature modules (sessions, roster) with a thin Flask controller
layer over pure classification, ranking and roster logic.
"""
