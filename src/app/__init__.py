"""App — núcleo do serviço: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: modelos de lead e resultados de validação
- use_cases/: casos de uso (pipeline de submissão de lead)
- services/: gateway de idempotência e publicação de eventos
- infra/: implementações concretas de IO (secrets, stores, eventos, crypto)
- protocols/: contratos/interfaces
- observability/: correlation id e métricas em log

Padrão: app executa; api adapta; utils apoia.
"""
