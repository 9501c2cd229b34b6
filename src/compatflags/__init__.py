"""Toggle the per-user RunAsInvoker compatibility flag for an installed application."""
