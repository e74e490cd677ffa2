"""Type hints used in Club Ranking."""

from typing import Dict, FrozenSet, List, Optional, Protocol, Set, Tuple

# Opaque player identifier
PlayerId = str

# Unordered pair of player ids that already met in a session
PairKey = FrozenSet[PlayerId]
PlayedPairs = Set[PairKey]

# One slot of a drawn round: two ids, or one id and None for a bye
Pairing = Tuple[PlayerId, Optional[PlayerId]]
RoundPairings = List[Pairing]

# Accumulated rating change per player id
RatingDeltas = Dict[PlayerId, int]


class Shuffler(Protocol):
    """Anything that can shuffle a list in place, e.g. ``random.Random``."""

    def shuffle(self, x: list) -> None: ...


#  LocalWords:  PairKey PlayedPairs RoundPairings
