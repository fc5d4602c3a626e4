from django.core.files.base import ContentFile
from django.db import models, transaction
from django.db.models import Max

from .checksum import file_checksum
from .exceptions import DuplicatePathError

#: Products are always created directly below the object tree root.
OBJECT_ROOT_ID = 1


class Folder(models.Model):
    """A node of the object or the asset tree. Both trees have a root at "/"."""

    class Tree(models.TextChoices):
        OBJECT = 'object'
        ASSET = 'asset'

    tree = models.CharField(max_length=10, choices=Tree.choices)
    parent = models.ForeignKey('self', null=True, blank=True, on_delete=models.PROTECT)
    path = models.CharField(max_length=765)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['tree', 'path'], name='unique_folder_path'),
        ]

    def __str__(self):
        return f"{self.tree}:{self.path}"

    @classmethod
    def get_by_path(cls, tree, path):
        return cls.objects.filter(tree=tree, path=path).first()


class VersionManager(models.Manager):
    def add(self, content_id, content_type, binary_file_hash=None):
        """Append the next version row for one element."""
        latest = self.filter(
            content_id=content_id, content_type=content_type
        ).aggregate(latest=Max('version_count'))['latest']
        return self.create(
            content_id=content_id,
            content_type=content_type,
            version_count=(latest or 0) + 1,
            binary_file_hash=binary_file_hash,
        )


class Version(models.Model):
    """Append-only save history of assets and objects."""

    class ContentType(models.TextChoices):
        ASSET = 'asset'
        OBJECT = 'object'

    content_id = models.PositiveBigIntegerField()
    content_type = models.CharField(max_length=10, choices=ContentType.choices)
    version_count = models.PositiveIntegerField()
    binary_file_hash = models.CharField(max_length=128, null=True, blank=True, db_index=True)
    date = models.DateTimeField(auto_now_add=True)

    objects = VersionManager()

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=['content_type', 'content_id', 'version_count'],
                name='unique_version_count',
            ),
        ]

    def __str__(self):
        return f"{self.content_type} {self.content_id} v{self.version_count}"


class Asset(models.Model):
    class Type(models.TextChoices):
        IMAGE = 'image'
        UNKNOWN = 'unknown'

    parent = models.ForeignKey(Folder, on_delete=models.PROTECT, related_name='assets')
    filename = models.CharField(max_length=255)
    type = models.CharField(max_length=10, choices=Type.choices, default=Type.UNKNOWN)
    file = models.FileField(upload_to='assets/', blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    modified_at = models.DateTimeField(auto_now=True)

    _data = None

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['parent', 'filename'], name='unique_asset_path'),
        ]

    def __str__(self):
        return self.full_path

    @property
    def full_path(self):
        return f"{self.parent.path}{self.filename}"

    @property
    def is_image(self):
        return self.type == self.Type.IMAGE

    def set_data(self, content: bytes):
        """Stage binary content to be written on the next save()."""
        self._data = content

    def get_data(self) -> bytes:
        if self._data is not None:
            return self._data
        with self.file.open('rb') as f:
            return f.read()

    def save(self, *args, **kwargs):
        taken = Asset.objects.filter(parent=self.parent, filename=self.filename)
        if self.pk is not None:
            taken = taken.exclude(pk=self.pk)
        if taken.exists():
            raise DuplicatePathError(self.full_path)

        data = self._data
        with transaction.atomic():
            if data is not None:
                self.file.save(self.filename, ContentFile(data), save=False)
            super().save(*args, **kwargs)

            if data is not None:
                binary_file_hash = file_checksum(data)
            else:
                previous = (
                    Version.objects.filter(content_type=Version.ContentType.ASSET, content_id=self.pk)
                    .order_by('-version_count')
                    .first()
                )
                binary_file_hash = previous.binary_file_hash if previous else None
            Version.objects.add(self.pk, Version.ContentType.ASSET, binary_file_hash)
        self._data = None


class ProductQuerySet(models.QuerySet):
    def visible(self, include_unpublished=True):
        if include_unpublished:
            return self
        return self.filter(published=True)


class Product(models.Model):
    gtin = models.CharField(max_length=64, unique=True)
    key = models.CharField(max_length=255)
    parent = models.ForeignKey(Folder, on_delete=models.PROTECT, related_name='products')
    name = models.CharField(max_length=255, blank=True)
    date = models.DateTimeField(null=True, blank=True)
    image = models.ForeignKey(
        Asset, null=True, blank=True, on_delete=models.SET_NULL, related_name='products'
    )
    published = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    modified_at = models.DateTimeField(auto_now=True)

    objects = ProductQuerySet.as_manager()

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['parent', 'key'], name='unique_product_path'),
        ]

    def __str__(self):
        return f"{self.gtin} ({self.name})"

    def save(self, *args, **kwargs):
        """Validate, save and append an object version."""
        self.full_clean()
        with transaction.atomic():
            super().save(*args, **kwargs)
            Version.objects.add(self.pk, Version.ContentType.OBJECT)


class Thumbnail(models.Model):
    """A derived rendition of an image asset, rendered on first access."""

    asset = models.ForeignKey(Asset, on_delete=models.CASCADE, related_name='thumbnails')
    preset = models.CharField(max_length=32)
    file = models.FileField(upload_to='thumbnails/', blank=True)
    width = models.PositiveIntegerField(null=True, blank=True)
    height = models.PositiveIntegerField(null=True, blank=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['asset', 'preset'], name='unique_asset_thumbnail'),
        ]

    def __str__(self):
        return f"{self.asset} [{self.preset}]"

    @property
    def path_reference(self):
        """Storage name of the rendition; renders it first if needed."""
        if not self.file:
            from .thumbnails import render_thumbnail

            render_thumbnail(self)
        return self.file.name or None
