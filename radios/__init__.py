"""Transport backends: TCP, serial and rigctl."""
