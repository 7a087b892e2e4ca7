############################################
# imports
############################################

from abc import ABC, abstractmethod

############################################
# Property Filter Class
############################################


class PropertyFilterBase(ABC):
    """
    An abstract base class for creating sequence property filters.

    The `PropertyFilterBase` class serves as a template for filters that decide whether a designed oligo can be used.
    Subclasses must implement the `apply` method to define the filtering logic.
    """

    def __init__(self) -> None:
        """Constructor for the PropertyFilterBase class."""

    @abstractmethod
    def apply(self, sequence: str, partner_sequence: str = None) -> bool:
        """
        Evaluate whether the sequence meets the filter's criteria.

        :param sequence: The nucleotide sequence.
        :type sequence: str
        :param partner_sequence: A second oligo used together with the sequence, defaults to None.
        :type partner_sequence: str, optional
        :return: `True` if the sequence meets the filter's criteria, `False` otherwise.
        :rtype: bool
        """
