"""FieldLabels: resolves raw Reaxys field tags to human-readable labels.

Reaxys returns fields under dotted codes such as ``IDE.XRN`` or ``RX.ID``.
Flattened records are keyed by readable labels instead.  Tags missing from
the table resolve to themselves (whitespace stripped), so the resolver is
total: every tag maps to some label.

Labels matter to the flattener beyond display:
- A label containing "Reaxys Registry Number" marks a field that is never
  concatenated when repeated.
- A label containing "RY.STR" triggers the reaction-id lookup from the
  ``rn`` attribute.
- The label "citation" expands the element inline.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

# Labels for the most common Reaxys field codes.  Codes without an entry
# keep their raw tag as label.
DEFAULT_LABELS: Mapping[str, str] = MappingProxyType(
    {
        # Substance identification
        "IDE.XRN": "Reaxys Registry Number",
        "IDE.CN": "Chemical Name",
        "IDE.MF": "Molecular Formula",
        "IDE.MW": "Molecular Weight",
        "IDE.INCHI": "InChI Key",
        "IDE.NOR": "Number of Reactions",
        "IDE.NOREF": "Number of References",
        "IDE.ED": "Entry Date",
        "IDE.UPD": "Update Date",
        # Reactions
        "RX.ID": "Reaction ID",
        "RX.RXRN": "Reactant",
        "RX.PXRN": "Product",
        "RX.NVAR": "Number of Reaction Details",
        "RXD.YD": "Yield",
        "RXD.T": "Temperature",
        "RXD.TIM": "Time",
        "RXD.SOL": "Solvent",
        "RXD.RGT": "Reagent",
        "RXD.CAT": "Catalyst",
        "RXD.STP": "Number of Steps",
        # Citations
        "CIT.AU": "Author",
        "CIT.TI": "Title",
        "CIT.JT": "Journal",
        "CIT.PY": "Publication Year",
        "CIT.VL": "Volume",
        "CIT.NB": "Issue",
        "CIT.PAG": "Page",
        "CIT.DOI": "DOI",
        "CIT.PREPY": "Priority Year",
        "CIT.PN": "Patent Number",
        # Physical data
        "MP.MP": "Melting Point",
        "BP.BP": "Boiling Point",
        "BP.P": "Boiling Point Pressure",
        "DEN.DEN": "Density",
        "DEN.T": "Density Temperature",
    }
)


class FieldLabels:
    """Table-backed field label resolver.

    Satisfies the ``FieldLabelResolver`` Protocol structurally.  Resolution
    is deterministic: the same tag always yields the same label.

    Args:
        overrides: Extra tag -> label pairs layered over ``DEFAULT_LABELS``.

    Example usage:
        labels = FieldLabels()
        labels.resolve("IDE.XRN")     # "Reaxys Registry Number"
        labels.resolve(" DAT01 ")     # "DAT01"
    """

    def __init__(self, overrides: Mapping[str, str] | None = None) -> None:
        self._labels: dict[str, str] = dict(DEFAULT_LABELS)
        if overrides:
            self._labels.update(overrides)

    def resolve(self, tag: str) -> str:
        key = tag.strip()
        return self._labels.get(key, key)
