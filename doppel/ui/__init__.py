"""Front ends for reviewing groups: a terminal session and a PyQt5 window."""
