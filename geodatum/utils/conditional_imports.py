"""
Intercepts import errors concerning optional dependencies so that the user is told
which geodatum extra provides the missing package.
"""

__all__ = ['ConditionalPackageInterceptor']

from typing import Dict, Union

from geodatum.utils.mixins import LoggingMixin


class ConditionalPackageInterceptor(LoggingMixin):
    """
    A meta path finder, consulted only after every regular finder has failed, which turns a bare
    ModuleNotFoundError for an optional dependency into one that names the extra to install.

    To use:
        In the package's root __init__.py:

            ConditionalPackageInterceptor.permit_packages(
                {'pyproj': 'geodatum[proj]'}
            )
            sys.meta_path.append(ConditionalPackageInterceptor)

    """

    PERMITTED_PACKAGES: Dict[str, str] = {}

    @classmethod
    def permit_packages(cls, packages: Union[list, dict]) -> None:
        """
        Registers optional packages along with the pip requirement that provides them.

        Args:
            packages (Union[list, dict]):
                Either a list of names (import name == pip name) or a dict mapping
                the import name to its pip requirement, e.g. {"pyproj": "geodatum[proj]"}

        Returns:
            None
        """
        if isinstance(packages, list):
            cls.PERMITTED_PACKAGES.update({item: item for item in packages})
        elif isinstance(packages, dict):
            cls.PERMITTED_PACKAGES.update(packages)
        else:
            raise TypeError(
                f"Permitted packages must be submitted as a list or dict, not {type(packages)}"
            )

    @classmethod
    def find_spec(  # pylint: disable=unused-argument, inconsistent-return-statements
            cls, name, path, target=None
    ):
        """
        Called by importlib once all other finders have failed to locate a module. Modules
        that aren't registered optional dependencies are left to the usual ModuleNotFoundError.
        """
        if name not in cls.PERMITTED_PACKAGES:
            return

        raise ModuleNotFoundError(
            f"You are attempting to use functionality which requires an optional package "
            f"({name}). Install it with:\n"
            f"    pip install {cls.PERMITTED_PACKAGES[name]}",
            name=name,
        )
