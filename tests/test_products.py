import pytest
from django.core.exceptions import ValidationError

from catalog.models import OBJECT_ROOT_ID, Folder, Product, Version
from catalog.products import get_product, valid_key


class TestValidKey:
    @pytest.mark.parametrize('value, expected', [
        ('0001', '0001'),
        ('  4006381333931 ', '4006381333931'),
        ('a/b', 'a-b'),
        ('a\\b', 'a-b'),
        ('a\tb\nc', 'a-b-c'),
        ('a   b', 'a b'),
        ('', '_'),
        ('..', '_'),
    ])
    def test_key(self, value, expected):
        assert valid_key(value) == expected

    def test_long_value_is_truncated(self):
        assert len(valid_key('9' * 300)) == 255


@pytest.mark.django_db
class TestGetProduct:
    def test_unknown_gtin_builds_unsaved_product_below_root(self):
        product = get_product('0001')

        assert product.pk is None
        assert product.gtin == '0001'
        assert product.key == '0001'
        assert product.parent_id == OBJECT_ROOT_ID
        assert Product.objects.count() == 0

    def test_known_gtin_returns_existing_product(self):
        existing = get_product('0001')
        existing.name = 'Widget'
        existing.save()

        assert get_product('0001').pk == existing.pk

    def test_unpublished_product_is_found_by_default(self):
        existing = get_product('0001')
        existing.published = False
        existing.save()

        assert get_product('0001').pk == existing.pk

    def test_unpublished_product_hidden_when_requested(self):
        existing = get_product('0001')
        existing.save()

        assert get_product('0001', include_unpublished=False).pk is None


@pytest.mark.django_db
class TestProductSave:
    def test_save_records_object_version(self):
        product = get_product('0001')
        product.save()
        product.save()

        counts = Version.objects.filter(content_type='object', content_id=product.pk)
        assert sorted(counts.values_list('version_count', flat=True)) == [1, 2]

    def test_save_validates_fields(self):
        product = get_product('0001')
        product.name = 'x' * 256

        with pytest.raises(ValidationError):
            product.save()
        assert Product.objects.count() == 0

    def test_two_gtins_with_same_key_cannot_both_be_saved(self):
        get_product('a/b').save()

        with pytest.raises(ValidationError):
            get_product('a-b').save()


@pytest.mark.django_db
class TestRootFolders:
    def test_object_root_has_fixed_id(self):
        root = Folder.objects.get(pk=OBJECT_ROOT_ID)
        assert (root.tree, root.path) == ('object', '/')

    def test_asset_root_exists_separately(self):
        root = Folder.get_by_path(Folder.Tree.ASSET, '/')
        assert root is not None
        assert root.pk != OBJECT_ROOT_ID

    def test_new_folder_gets_a_fresh_id(self):
        folder = Folder.objects.create(tree=Folder.Tree.OBJECT, path='/imports/')
        assert folder.pk not in (OBJECT_ROOT_ID, Folder.get_by_path(Folder.Tree.ASSET, '/').pk)
