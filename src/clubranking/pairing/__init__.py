from clubranking.pairing.random_pairing import bye_of, generate_round, is_bye

__all__ = [
    "bye_of",
    "generate_round",
    "is_bye",
]
