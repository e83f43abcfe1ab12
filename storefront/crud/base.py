# storefront/crud/base.py

from typing import Any, Dict, Generic, Type, TypeVar, Union
from pydantic import BaseModel
from sqlalchemy.orm import Session
from ..database import Base

# Tipo genérico para o nosso Modelo SQLAlchemy
ModelType = TypeVar("ModelType", bound=Base)

class CRUDBase(Generic[ModelType]):
    """
    Gateway base com a inserção comum a todas as tabelas.
    Os gateways especializados acrescentam as suas próprias consultas.
    """
    def __init__(self, model: Type[ModelType]):
        """
        Construtor da classe CRUD.

        :param model: A classe do modelo SQLAlchemy (ex: models.Currency)
        """
        self.model = model

    def create(self, db: Session, *, obj_in: Union[BaseModel, Dict[str, Any]]) -> ModelType:
        """Cria um novo objeto no banco (aceita um schema Pydantic ou um dicionário)."""
        obj_in_data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump()
        db_obj = self.model(**obj_in_data)  # Desempacota o dict no construtor do modelo
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj
