from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models
import uuid


class UserManager(BaseUserManager):
    """Custom user manager for name-based authentication."""

    def create_user(self, name, password=None, email=None, **extra_fields):
        if not name:
            raise ValueError('Name is required')

        email = self.normalize_email(email) if email else None
        user = self.model(name=name, email=email, **extra_fields)
        # password=None stores an unusable hash (external identity accounts)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, name, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True')

        return self.create_user(name, password, **extra_fields)


class User(AbstractBaseUser, PermissionsMixin):
    """Custom user model authenticated by unique name."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, unique=True)
    email = models.EmailField(max_length=255, unique=True, null=True, blank=True)

    # Subject id issued by the external identity provider
    external_id = models.CharField(max_length=255, unique=True, null=True, blank=True)

    # Permissions
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = 'name'
    EMAIL_FIELD = 'email'
    REQUIRED_FIELDS = []

    class Meta:
        db_table = 'users'
        ordering = ['name']

    def __str__(self):
        return self.name

    @property
    def has_password(self):
        return self.has_usable_password()

    @property
    def has_external_identity(self):
        return bool(self.external_id)

    def can_log_in(self):
        """An account needs a password or a linked external identity."""
        return self.has_password or self.has_external_identity
