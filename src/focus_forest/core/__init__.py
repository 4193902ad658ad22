"""Pure helpers shared by the app and tui layers."""
