
import pytest

from geodatum.utils.conditional_imports import ConditionalPackageInterceptor


def test_permit_packages():
    ConditionalPackageInterceptor.permit_packages(['somepkg'])
    assert ConditionalPackageInterceptor.PERMITTED_PACKAGES['somepkg'] == 'somepkg'

    ConditionalPackageInterceptor.permit_packages({'otherpkg': 'geodatum[other]'})
    assert ConditionalPackageInterceptor.PERMITTED_PACKAGES['otherpkg'] == 'geodatum[other]'

    with pytest.raises(TypeError):
        ConditionalPackageInterceptor.permit_packages('pyproj')


def test_find_spec():
    import geodatum  # noqa: F401, registers the optional packages

    # Unregistered modules are left alone
    assert ConditionalPackageInterceptor.find_spec('not_a_real_package', None) is None

    with pytest.raises(ModuleNotFoundError, match=r'geodatum\[proj\]'):
        ConditionalPackageInterceptor.find_spec('pyproj', None)

    with pytest.raises(ModuleNotFoundError, match=r'geodatum\[karney\]'):
        ConditionalPackageInterceptor.find_spec('geographiclib', None)
