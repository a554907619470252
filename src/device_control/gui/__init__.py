"""customtkinter control panel."""
