from __future__ import annotations

from abc import ABC, abstractmethod

from ..configuration import AlertSubject, UpdateSubject


class BaseDialogManager(ABC):
    @abstractmethod
    def display_alert_dialog(self, subject: AlertSubject, blocking: bool) -> None:
        raise NotImplementedError

    @abstractmethod
    def display_optional_update_dialog(self, subject: UpdateSubject, update_url: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def display_required_update_dialog(self, subject: UpdateSubject, update_url: str) -> None:
        raise NotImplementedError
