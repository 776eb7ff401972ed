# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User, normalize_email
from ...domain.constants import UserFields
from ...domain.exceptions import ConflictError, InternalError
from ...utils.datetime_utils import ensure_utc
from .mongo_connection import get_user_collection, with_timeout


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for (matched lower-cased)

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await with_timeout(
                self.user_collection.find_one({UserFields.EMAIL: normalize_email(email)}),
                "finding user by email",
            )
        except PyMongoError as e:
            raise InternalError(f"Error finding user by email: {str(e)}")
        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise (including malformed IDs)
        """
        if not user_id:
            return None

        try:
            object_id = ObjectId(user_id)
        except (InvalidId, ValueError, TypeError):
            return None

        try:
            document = await with_timeout(
                self.user_collection.find_one({UserFields.MONGO_ID: object_id}),
                "finding user by ID",
            )
        except PyMongoError as e:
            raise InternalError(f"Error finding user by ID: {str(e)}")
        if document is None:
            return None
        return self._document_to_user(document)

    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)

        Args:
            user: User domain model to save

        Returns:
            Saved User domain model with ID set

        Raises:
            ConflictError: If another user already has this email
        """
        if not user:
            raise ValueError("User cannot be None")

        user_dict = self._user_to_dict(user)
        try:
            if user.id:
                object_id = self._parse_id(user.id)
                update_result = await with_timeout(
                    self.user_collection.update_one(
                        {UserFields.MONGO_ID: object_id},
                        {"$set": {k: v for k, v in user_dict.items() if k != UserFields.MONGO_ID}},
                    ),
                    "updating user",
                )
                if update_result.matched_count == 0:
                    raise InternalError(f"User with ID {user.id} not found")
                document_id = object_id
            else:
                user_dict.pop(UserFields.MONGO_ID, None)
                result = await with_timeout(self.user_collection.insert_one(user_dict), "inserting user")
                document_id = result.inserted_id

            saved_document = await with_timeout(
                self.user_collection.find_one({UserFields.MONGO_ID: document_id}),
                "reloading saved user",
            )
        except DuplicateKeyError:
            raise ConflictError(f"Duplicate email on save: {user.email}", user_message="Email already exists")
        except PyMongoError as e:
            raise InternalError(f"Error saving user: {str(e)}")

        if saved_document is None:
            raise InternalError("User was saved but could not be retrieved")
        return self._document_to_user(saved_document)

    @staticmethod
    def _parse_id(user_id: str) -> ObjectId:
        try:
            return ObjectId(user_id)
        except (InvalidId, ValueError, TypeError):
            raise InternalError(f"Invalid user ID format: {user_id}")

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise InternalError("Invalid user document: missing _id field")

        try:
            return User(
                id=str(document[UserFields.MONGO_ID]),
                name=document.get(UserFields.NAME, ""),
                email=document.get(UserFields.EMAIL, ""),
                hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
                phone_number=document.get(UserFields.PHONE_NUMBER),
                city=document.get(UserFields.CITY),
                created_at=ensure_utc(document.get(UserFields.CREATED_AT)),
            )
        except ValueError as e:
            raise InternalError(f"Corrupt user document {document[UserFields.MONGO_ID]}: {str(e)}")

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            UserFields.NAME: user.name,
            UserFields.EMAIL: normalize_email(user.email),
            UserFields.HASHED_PASSWORD: user.hashed_password,
            UserFields.PHONE_NUMBER: user.phone_number,
            UserFields.CITY: user.city,
            UserFields.CREATED_AT: user.created_at,
        }
