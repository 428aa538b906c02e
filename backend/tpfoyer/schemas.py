"""Pydantic request/response schemas used by the API.

Schemas keep the camelCase wire names (`idFoyer`, `nomUniversite`, ...)
separate from the snake_case table columns. Every field is optional:
controllers accept whatever the client sends and pass it on unchanged.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from . import models


class WireModel(BaseModel):
    """Base schema reading and writing camelCase field names."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FoyerSchema(WireModel):
    id_foyer: Optional[int] = None
    nom_foyer: Optional[str] = None
    capacite_foyer: Optional[int] = None

    @classmethod
    def from_model(cls, foyer: models.Foyer) -> "FoyerSchema":
        return cls(
            id_foyer=foyer.id_foyer,
            nom_foyer=foyer.nom_foyer,
            capacite_foyer=foyer.capacite_foyer,
        )

    def to_model(self) -> models.Foyer:
        return models.Foyer(
            id_foyer=self.id_foyer,
            nom_foyer=self.nom_foyer,
            capacite_foyer=self.capacite_foyer,
        )


class UniversiteSchema(WireModel):
    """A university with its foyer nested as a full object (or null)."""
    id_universite: Optional[int] = None
    nom_universite: Optional[str] = None
    adresse: Optional[str] = None
    foyer: Optional[FoyerSchema] = None

    @classmethod
    def from_model(cls, universite: models.Universite) -> "UniversiteSchema":
        foyer = universite.foyer
        return cls(
            id_universite=universite.id_universite,
            nom_universite=universite.nom_universite,
            adresse=universite.adresse,
            foyer=FoyerSchema.from_model(foyer) if foyer is not None else None,
        )

    def to_model(self) -> models.Universite:
        """Build the table row, keeping only the nested foyer's id as reference."""
        foyer_id = self.foyer.id_foyer if self.foyer is not None else None
        return models.Universite(
            id_universite=self.id_universite,
            nom_universite=self.nom_universite,
            adresse=self.adresse,
            foyer_id=foyer_id,
        )


class EtudiantSchema(WireModel):
    id_etudiant: Optional[int] = None
    nom_etudiant: Optional[str] = None
    prenom_etudiant: Optional[str] = None
    cin_etudiant: Optional[int] = None
    date_naissance: Optional[date] = None

    @classmethod
    def from_model(cls, etudiant: models.Etudiant) -> "EtudiantSchema":
        return cls(
            id_etudiant=etudiant.id_etudiant,
            nom_etudiant=etudiant.nom_etudiant,
            prenom_etudiant=etudiant.prenom_etudiant,
            cin_etudiant=etudiant.cin_etudiant,
            date_naissance=etudiant.date_naissance,
        )

    def to_model(self) -> models.Etudiant:
        return models.Etudiant(
            id_etudiant=self.id_etudiant,
            nom_etudiant=self.nom_etudiant,
            prenom_etudiant=self.prenom_etudiant,
            cin_etudiant=self.cin_etudiant,
            date_naissance=self.date_naissance,
        )
