"""HTTP service exposing Tugon tokenization and token feedback."""
