raise RuntimeError("sample module failing at import")
