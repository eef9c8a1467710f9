import logging

from rest_framework import serializers
from rest_framework.exceptions import NotFound
from django.contrib.auth import get_user_model

from .errors import DecryptionError
from .generator import DEFAULT_LENGTH, PasswordPolicy
from .models import Category, PasswordEntry

logger = logging.getLogger(__name__)

# borne le length par défaut (len(password)) sous PositiveSmallIntegerField
MAX_SECRET_LENGTH = 4096


class CategorySummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ["id","name","color"]

class CategorySerializer(serializers.ModelSerializer):
    passwordCount = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Category
        fields = ["id","name","description","color","passwordCount","createdAt"]

    def get_passwordCount(self, obj):
        count = getattr(obj, "password_count", None)
        return count if count is not None else obj.passwords.count()

    def validate_name(self, value):
        name = value.strip()
        if not name:
            raise serializers.ValidationError("Name is required.")
        owned = Category.objects.filter(owner=self.context["request"].user, name=name)
        if self.instance is not None:
            owned = owned.exclude(pk=self.instance.pk)
        if owned.exists():
            raise serializers.ValidationError("A category with this name already exists.")
        return name

    def validate_description(self, value):
        return (value or "").strip()

class PasswordSummarySerializer(serializers.ModelSerializer):
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = PasswordEntry
        fields = ["id","title","createdAt"]

class CategoryDetailSerializer(CategorySerializer):
    passwords = PasswordSummarySerializer(many=True, read_only=True)

    class Meta(CategorySerializer.Meta):
        fields = CategorySerializer.Meta.fields + ["passwords"]


class PasswordSerializer(serializers.ModelSerializer):
    """
    Entrée chiffrée. Le champ ``password`` est reçu en clair, chiffré avant
    l'écriture, et renvoyé déchiffré à la lecture (contexte : ``cipher``).
    """
    password = serializers.CharField(
        write_only=True, required=False, trim_whitespace=False, max_length=MAX_SECRET_LENGTH,
    )
    length = serializers.IntegerField(required=False, min_value=1, max_value=32767)
    includeUppercase = serializers.BooleanField(source="include_uppercase", required=False)
    includeLowercase = serializers.BooleanField(source="include_lowercase", required=False)
    includeDigits = serializers.BooleanField(source="include_digits", required=False)
    includeSymbols = serializers.BooleanField(source="include_symbols", required=False)
    categoryId = serializers.IntegerField(source="category_id", required=False, allow_null=True)
    category = CategorySummarySerializer(read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = PasswordEntry
        fields = [
            "id","title","password","length",
            "includeUppercase","includeLowercase","includeDigits","includeSymbols",
            "categoryId","category","createdAt","updatedAt",
        ]

    @property
    def cipher(self):
        return self.context["cipher"]

    def validate_categoryId(self, value):
        if value is None:
            return None
        if not Category.objects.filter(pk=value, owner=self.context["request"].user).exists():
            raise NotFound("Category not found.")
        return value

    def validate(self, attrs):
        if self.instance is None and not attrs.get("password"):
            raise serializers.ValidationError({"password": "This field is required."})
        if "password" in attrs and attrs["password"] == "":
            raise serializers.ValidationError({"password": "This field may not be blank."})
        return attrs

    def create(self, validated_data):
        password = validated_data.pop("password")
        validated_data.setdefault("length", len(password))
        validated_data["encrypted_secret"] = self.cipher.encrypt(password)
        return super().create(validated_data)

    def update(self, instance, validated_data):
        password = validated_data.pop("password", None)
        if password is not None:
            instance.encrypted_secret = self.cipher.encrypt(password)
        return super().update(instance, validated_data)

    def to_representation(self, instance):
        data = super().to_representation(instance)
        try:
            data["password"] = self.cipher.decrypt(instance.encrypted_secret)
        except DecryptionError:
            if not self.context.get("skip_undecryptable"):
                raise
            logger.warning("Password entry %s could not be decrypted", instance.pk)
            data["password"] = None
            data["decryptionFailed"] = True
        return data


class GenerateSerializer(serializers.Serializer):
    # bornes vérifiées par PasswordPolicy.validate() (InvalidPolicy -> 400)
    length = serializers.IntegerField(default=DEFAULT_LENGTH)
    includeUppercase = serializers.BooleanField(source="include_uppercase", default=True)
    includeLowercase = serializers.BooleanField(source="include_lowercase", default=True)
    includeDigits = serializers.BooleanField(source="include_digits", default=True)
    includeSymbols = serializers.BooleanField(source="include_symbols", default=True)

    def to_policy(self) -> PasswordPolicy:
        return PasswordPolicy(**self.validated_data)


class RegisterSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=150)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=6, trim_whitespace=False)

    def validate_username(self, value):
        if get_user_model().objects.filter(username__iexact=value).exists():
            raise serializers.ValidationError("This username is already taken.")
        return value

    def validate_email(self, value):
        if get_user_model().objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError("User already exists. Use another email.")
        return value

    def create(self, validated_data):
        return get_user_model().objects.create_user(
            username=validated_data["username"],
            email=validated_data["email"],
            password=validated_data["password"],
        )
