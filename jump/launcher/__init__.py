"""Jump launcher app: Flet shell, controllers and shell state."""
