# storefront/core/logging.py
"""
Configuração do logging da aplicação.

Cada módulo pega o seu logger com ``logging.getLogger(__name__)``; aqui só se
configura, uma vez, o logger raiz "storefront".
"""

import logging
import sys
import threading

LOG_NAME = "storefront"
LOG_FORMAT = "%(asctime)s [%(levelname)s] - (%(name)s) - %(message)s"

_lock = threading.Lock()
_configured = False

def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Liga um handler de consola ao logger da aplicação.

    Chamar mais de uma vez só atualiza o nível.
    """
    global _configured
    logger = logging.getLogger(LOG_NAME)
    with _lock:
        logger.setLevel(level.upper())
        if not _configured:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(handler)
            logger.propagate = False
            _configured = True
    return logger
