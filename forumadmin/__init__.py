"""Interactive admin tool for managing forum moderators."""
