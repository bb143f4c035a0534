"""Stack trace values and the error extraction capability."""
