"""Priority task list: session state, view derivation and page helpers."""
