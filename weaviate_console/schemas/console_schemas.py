"""
Pydantic Schemas for the Console API

Request bodies of the collection, record and connection endpoints. Field
names are the camelCase names the browser UI sends.
"""

import uuid
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

CREATE_TEST_ACTION = "create-test"


# ==================== Request Schemas ====================

class CollectionsActionRequest(BaseModel):
    """Request schema for POST /api/collections"""
    action: str = Field(..., description="Action to perform; only 'create-test' is supported")

    @field_validator('action')
    @classmethod
    def validate_action(cls, v):
        if v != CREATE_TEST_ACTION:
            raise ValueError(f"unknown action '{v}', expected '{CREATE_TEST_ACTION}'")
        return v


class DeleteRequest(BaseModel):
    """Request schema for DELETE /api/collection/{name}"""
    objectIds: Optional[List[str]] = Field(default=None, description="Ids of the objects to delete")
    deleteCollection: bool = Field(default=False, description="Drop the whole collection")
    tenant: Optional[str] = Field(default=None, description="Tenant of the objects (multi-tenant collections)")

    @field_validator('objectIds')
    @classmethod
    def validate_object_ids(cls, v):
        for object_id in v or []:
            try:
                uuid.UUID(object_id)
            except ValueError:
                raise ValueError(f"invalid object id '{object_id}', expected a UUID")
        return v

    @model_validator(mode='after')
    def check_target(self):
        """Exactly one of objectIds and deleteCollection must be given"""
        if self.deleteCollection and self.objectIds:
            raise ValueError("objectIds and deleteCollection are mutually exclusive")
        if not self.deleteCollection and self.objectIds is None:
            raise ValueError("either objectIds or deleteCollection is required")
        return self


class ConnectionRequest(BaseModel):
    """Request schema for POST /api/connection"""
    url: str = Field(..., description="Weaviate endpoint; http:// is assumed when no scheme is given")
    grpcPort: Optional[int] = Field(default=None, ge=1, le=65535, description="gRPC port of the endpoint")
