# Standard library imports
import logging
from typing import Any, Dict, List, Optional, Union

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError, OperationFailure, PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.errors import (
    ConstraintError,
    NotFoundError,
    StoreUnavailableError,
    UserError,
)
from ...domain.validation import EMAIL_PATTERN, MAX_AGE, MIN_AGE, ValidRecord

logger = logging.getLogger(__name__)


# Server error code for a write rejected by the collection validator
DOCUMENT_VALIDATION_FAILURE = 121

EMAIL_INDEX_NAME = "email_unique"

# PCRE \z anchors at the absolute end of the string
STORE_EMAIL_PATTERN = rf"^{EMAIL_PATTERN.pattern}\z"

USER_JSON_SCHEMA: Dict[str, Any] = {
    "$jsonSchema": {
        "bsonType": "object",
        "required": [UserFields.NAME, UserFields.EMAIL, UserFields.AGE],
        "properties": {
            UserFields.NAME: {"bsonType": "string", "pattern": r"\S"},
            UserFields.EMAIL: {"bsonType": "string", "pattern": STORE_EMAIL_PATTERN},
            UserFields.AGE: {
                "bsonType": ["int", "long"],
                "minimum": MIN_AGE,
                "maximum": MAX_AGE,
            },
        },
    }
}


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: AsyncIOMotorCollection) -> None:
        self.user_collection = user_collection

    async def create(self, record: ValidRecord) -> Union[User, UserError]:
        """
        Insert a new user document

        Args:
            record: Validated user fields

        Returns:
            Created User with the store-assigned ID, or ConstraintError /
            StoreUnavailableError
        """
        document = dict(record.fields)

        try:
            result = await self.user_collection.insert_one(document)
        except PyMongoError as e:
            return self._translate_error("creating user", e)

        document[UserFields.MONGO_ID] = result.inserted_id
        return self._document_to_user(document)

    async def list_all(self) -> Union[List[User], UserError]:
        """List every user; order is whatever the store returns"""
        try:
            documents = await self.user_collection.find({}).to_list(length=None)
        except PyMongoError as e:
            return self._translate_error("listing users", e)

        return [self._document_to_user(document) for document in documents]

    async def find_by_id(self, user_id: str) -> Union[User, UserError]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model, NotFoundError if absent or malformed,
            StoreUnavailableError on driver failure
        """
        object_id = self._parse_object_id(user_id)
        if object_id is None:
            return NotFoundError()

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            return self._translate_error("finding user by ID", e)

        if document is None:
            return NotFoundError()
        return self._document_to_user(document)

    async def update(self, user_id: str, record: ValidRecord) -> Union[User, UserError]:
        """
        Set the provided fields on an existing user

        The merge is a single find_one_and_update, so readers see either the
        old document or the fully merged one.

        Args:
            user_id: ID of the user to update
            record: Validated subset of fields to replace

        Returns:
            Merged User, or NotFoundError / ConstraintError / StoreUnavailableError
        """
        object_id = self._parse_object_id(user_id)
        if object_id is None:
            return NotFoundError()

        fields = dict(record.fields)
        if not fields:
            # $set rejects an empty document
            return await self.find_by_id(user_id)

        try:
            document = await self.user_collection.find_one_and_update(
                {UserFields.MONGO_ID: object_id},
                {"$set": fields},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            return self._translate_error("updating user", e)

        if document is None:
            return NotFoundError()
        return self._document_to_user(document)

    async def delete(self, user_id: str) -> Union[User, UserError]:
        """Delete user by ID and return the removed record"""
        object_id = self._parse_object_id(user_id)
        if object_id is None:
            return NotFoundError()

        try:
            document = await self.user_collection.find_one_and_delete({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            return self._translate_error("deleting user", e)

        if document is None:
            return NotFoundError()
        return self._document_to_user(document)

    async def ensure_constraints(self) -> Optional[UserError]:
        """
        Create the unique email index and attach the schema validator

        Safe to call on every startup: create_index is a no-op when the
        index exists and collMod replaces the validator in place.
        """
        try:
            await self.user_collection.create_index(
                [(UserFields.EMAIL, ASCENDING)],
                unique=True,
                name=EMAIL_INDEX_NAME,
            )
            await self.user_collection.database.command(
                {
                    "collMod": self.user_collection.name,
                    "validator": USER_JSON_SCHEMA,
                    "validationLevel": "strict",
                    "validationAction": "error",
                }
            )
        except PyMongoError as e:
            return self._translate_error("ensuring user collection constraints", e)

        logger.info(f"Constraints ready on collection '{self.user_collection.name}'")
        return None

    def _parse_object_id(self, user_id: str) -> Optional[ObjectId]:
        """
        Convert a path identifier to an ObjectId

        Returns None for anything that is not a 24-character hex string so
        callers can report it exactly like a missing record.
        """
        if not user_id or not ObjectId.is_valid(user_id):
            return None
        return ObjectId(user_id)

    def _translate_error(self, action: str, error: PyMongoError) -> UserError:
        """Map a driver exception onto an error value"""
        if isinstance(error, DuplicateKeyError):
            logger.info(f"Rejected duplicate email while {action}")
            return ConstraintError(message="Email already exists")
        if isinstance(error, OperationFailure) and error.code == DOCUMENT_VALIDATION_FAILURE:
            logger.info(f"Document failed collection validation while {action}")
            return ConstraintError(message="User does not satisfy the required schema")

        logger.error(f"Error {action}: {str(error)}")
        return StoreUnavailableError()

    def _document_to_user(self, document: Dict[str, Any]) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        return User(
            id=str(document[UserFields.MONGO_ID]),
            name=document.get(UserFields.NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            age=document.get(UserFields.AGE),
        )
