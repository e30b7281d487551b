"""Per-format validators that confirm candidate hits and measure file length."""