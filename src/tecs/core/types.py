"""Core type definitions for tecs."""

type EntityId = int
"""Opaque entity identity.

Unique among live entities only. Once an entity is removed its id may be handed
out again (see ``TecsSettings.reuse_entity_ids``), so never keep ids of removed
entities around.
"""
