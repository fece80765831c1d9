"""Taxonomic ranks and their display names."""

from __future__ import annotations

from enum import IntEnum


class TaxonRank(IntEnum):
    """Biological classification ranks, from the broadest to the narrowest."""

    DOMAIN = 0
    KINGDOM = 1
    PHYLUM = 2
    CLASS = 3
    ORDER = 4
    FAMILY = 5
    GENUS = 6
    SPECIES = 7


TOTAL_TAXONS = len(TaxonRank)

_NAMES = {
    TaxonRank.DOMAIN: "Domain",
    TaxonRank.KINGDOM: "Kingdom",
    TaxonRank.PHYLUM: "Phylum",
    TaxonRank.CLASS: "Class",
    TaxonRank.ORDER: "Order",
    TaxonRank.FAMILY: "Family",
    TaxonRank.GENUS: "Genus",
    TaxonRank.SPECIES: "Species",
}


def taxon_name(rank: TaxonRank | int) -> str:
    """Return the display name of a rank; raise ValueError for an unknown rank."""
    try:
        return _NAMES[TaxonRank(rank)]
    except (ValueError, KeyError):
        raise ValueError("invalid taxon rank name") from None


def main(argv: list[str] | None = None) -> int:
    """Print every rank name, one per line."""
    for rank in TaxonRank:
        print(taxon_name(rank))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())