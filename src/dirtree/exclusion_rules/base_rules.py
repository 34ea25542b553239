from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for entry exclusion rules.

    The tree walker consults an exclusion rules object for every directory entry it
    lists, before sorting and rendering. Rules only see the entry's own name (its
    basename), never its full path, so the same rules apply at every depth.

    Example:
        >>> class NoTempFiles(BaseExclusionRules):
        ...     def exclude(self, name: str) -> bool:
        ...         return name.endswith('.tmp')
        >>> rules = NoTempFiles()
        >>> rules.exclude("build.tmp")
        True
        >>> rules.exclude("main.py")
        False
        >>> rules.add_rule("main.py")
        Traceback (most recent call last):
            ...
        NotImplementedError: NoTempFiles doesn't support adding individual rules.
    """

    @abstractmethod
    def exclude(self, name: str) -> bool:
        """
        Determine if a directory entry should be left out of the tree.

        Args:
            name (str): The entry's basename, e.g. "node_modules" or "main.py".

        Returns:
            bool: True if the entry should be skipped, False if it should be rendered.
        """
        pass

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Rule types that are fully configured at construction time use this default
        implementation, which raises NotImplementedError.

        Args:
            rule (str): The exclusion rule to add. Its format depends on the implementation.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
