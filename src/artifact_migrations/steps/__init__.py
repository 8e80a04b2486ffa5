"""
Steps concretos de migração, por família.

    - chain   → v101 (promoção + renomeações), v102, v103 (propriedades)
    - service → v101 (promoção), v102 (nomes de operação)
    - common  → transformações compartilhadas

Cada Step satisfaz `core.pipeline.step.MigrationStep` por duck typing.
"""
