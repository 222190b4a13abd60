from datetime import timedelta
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from fastapi import HTTPException, status
import logging

from .. import models
from ..auth import (
    authenticate_user as auth_authenticate_user,
    create_user as auth_create_user,
    create_access_token as auth_create_access_token
)
from ..core.settings import get_settings
from ..repositories import ExpectedCategoryDistributionRepository
from ..schemas import RegisterRequest, LoginRequest, AuthResponse, UserResponse
from .expected_category_distribution_service import ExpectedCategoryDistributionService

logger = logging.getLogger(__name__)


class AuthService:
    """Service for handling registration and login business logic."""

    @staticmethod
    def check_user_exists(db: Session, username: str, email: str) -> bool:
        """Check if a user with the given username or email already exists."""
        existing_user = db.query(models.User).filter(
            (models.User.username == username) | (models.User.email == email)
        ).first()
        return existing_user is not None

    @staticmethod
    def create_access_token_for_user(user: models.User) -> str:
        """Create an access token for the given user."""
        access_token_expires = timedelta(minutes=get_settings().access_token_expire_minutes)
        return auth_create_access_token(
            data={"sub": user.username, "user_id": user.id, "role": user.role.value},
            expires_delta=access_token_expires
        )

    @staticmethod
    def register_user(db: Session, request: RegisterRequest) -> AuthResponse:
        """
        Create a new user with the default categories and distributions.

        Args:
            db: Database session
            request: Registration request data

        Returns:
            AuthResponse with user and access token

        Raises:
            HTTPException: If username/email already exists or creation fails
        """
        try:
            if AuthService.check_user_exists(db, request.username, request.email):
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Username or email already registered"
                )

            user = auth_create_user(
                db=db,
                username=request.username,
                email=request.email,
                password=request.password
            )

            # Commits the user together with the seeded rows
            ExpectedCategoryDistributionService.seed_defaults(
                ExpectedCategoryDistributionRepository(db), user
            )
            db.refresh(user)

            access_token = AuthService.create_access_token_for_user(user)
            logger.info(f"Registered user {user.id}")

            return AuthResponse(
                user=UserResponse.model_validate(user),
                access_token=access_token,
                token_type="bearer"
            )

        except HTTPException:
            db.rollback()
            raise
        except IntegrityError:
            db.rollback()
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Username or email already registered"
            )
        except Exception as e:
            db.rollback()
            logger.error(f"Failed to register user {request.username}: {str(e)}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to create account"
            )

    @staticmethod
    def login_user(db: Session, request: LoginRequest) -> AuthResponse:
        """
        Authenticate user and return login response.

        Raises:
            HTTPException: If authentication fails
        """
        user = auth_authenticate_user(db, request.username, request.password)
        if not user:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Incorrect username or password",
                headers={"WWW-Authenticate": "Bearer"},
            )

        access_token = AuthService.create_access_token_for_user(user)

        return AuthResponse(
            user=UserResponse.model_validate(user),
            access_token=access_token,
            token_type="bearer"
        )
