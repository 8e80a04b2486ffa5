"""
Tipos canônicos de versão de documento.

Um documento exportado declara quais migrações seu conteúdo já reflete.
Historicamente existem duas representações, e ambas precisam ser
produzidas pelas estratégias de detecção:

    - forma explícita: lista de inteiros, ex.: "[1, 2, 5]"
      exatamente essas versões estão aplicadas (lacunas são legais)
    - forma legada: um único inteiro N
      equivalente ao conjunto contíguo {1..N}

Invariantes:
    - O conjunto é sempre interpretado como "versões a NÃO reaplicar"
    - Versões são inteiros não negativos
    - A forma legada nunca tem lacunas
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple


class VersionForm(str, Enum):
    """Representação de origem do conjunto de versões satisfeitas."""
    EXPLICIT = "explicit"
    LEGACY = "legacy"


@dataclass(frozen=True)
class SatisfiedVersions:
    """
    Conjunto imutável de versões já satisfeitas por um documento.

    Campos:
        - form: forma de origem (explícita ou legada)
        - versions: versões declaradas (forma explícita), ordem de origem
        - upper_bound: N da forma legada ({1..N}); None na forma explícita
        - source: nome da estratégia que produziu o resultado

    A pertença (`v in satisfied`) segue a forma: na explícita é pertença
    literal, na legada é `1 <= v <= N`. A forma legada não materializa o
    intervalo, que pode ser grande.
    """

    form: VersionForm
    versions: Tuple[int, ...] = ()
    upper_bound: Optional[int] = None
    source: str = ""

    @classmethod
    def explicit(cls, versions: Iterable[int], *, source: str = "") -> "SatisfiedVersions":
        return cls(form=VersionForm.EXPLICIT, versions=tuple(versions), source=source)

    @classmethod
    def legacy(cls, upper_bound: int, *, source: str = "") -> "SatisfiedVersions":
        return cls(form=VersionForm.LEGACY, upper_bound=upper_bound, source=source)

    def __contains__(self, version: object) -> bool:
        if not isinstance(version, int):
            return False
        if self.form is VersionForm.LEGACY:
            return 1 <= version <= (self.upper_bound or 0)
        return version in self.versions

    @property
    def max_version(self) -> int:
        if self.form is VersionForm.LEGACY:
            return self.upper_bound or 0
        return max(self.versions, default=0)

    def restricted_to(self, registered: Iterable[int]) -> List[int]:
        """Versões satisfeitas, ordenadas, limitadas às versões registradas."""
        return sorted(v for v in set(registered) if v in self)

    def above(self, latest: int) -> List[int]:
        """Versões declaradas acima de `latest` (exportadas por produto mais novo)."""
        if self.form is VersionForm.LEGACY:
            bound = self.upper_bound or 0
            return [bound] if bound > latest else []
        return sorted({v for v in self.versions if v > latest})
