"""SQLModel data models.

This module defines the application's database tables using SQLModel.
A `Universite` owns at most one `Foyer` through the `foyer_id` column;
the `Foyer` side carries no back-reference so the two kinds never point
at each other.
"""

from datetime import date
from typing import Optional

from sqlalchemy import BigInteger
from sqlmodel import Field, Relationship, SQLModel


class Foyer(SQLModel, table=True):
    """A dormitory.

    Fields:
    - `nom_foyer`: display name
    - `capacite_foyer`: number of beds, stored as a 64-bit integer
    """
    id_foyer: Optional[int] = Field(default=None, primary_key=True)
    nom_foyer: Optional[str] = None
    capacite_foyer: Optional[int] = Field(default=None, sa_type=BigInteger)


class Universite(SQLModel, table=True):
    """A university, optionally linked to the one `Foyer` it owns.

    `foyer_id` is unique so a foyer belongs to a single university.
    Removing the foyer detaches it (`SET NULL`); removing the university
    leaves the foyer untouched. The relationship does not cascade: saving
    a university never inserts or updates the foyer it points at.
    """
    id_universite: Optional[int] = Field(default=None, primary_key=True)
    nom_universite: Optional[str] = None
    adresse: Optional[str] = None
    foyer_id: Optional[int] = Field(
        default=None, foreign_key="foyer.id_foyer", unique=True, ondelete="SET NULL"
    )
    foyer: Optional[Foyer] = Relationship(sa_relationship_kwargs={"lazy": "joined", "cascade": ""})


class Etudiant(SQLModel, table=True):
    """A student. `cin_etudiant` is the national id number."""
    id_etudiant: Optional[int] = Field(default=None, primary_key=True)
    nom_etudiant: Optional[str] = None
    prenom_etudiant: Optional[str] = None
    cin_etudiant: Optional[int] = Field(default=None, sa_type=BigInteger)
    date_naissance: Optional[date] = None
