"""Services — imperative shell that wires entity rules to the store."""
