"""Clinic web-form intake: validate submissions and forward them by email."""
