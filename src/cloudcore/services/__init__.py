"""Service layer — instance factories, background monitors, validation and
concurrency helpers.

Services may import from domain, contracts and config.
They must never import from commands or output.
"""
