"""Flux de sortie textuel capturé depuis un processus.

Ce module définit TextStream, la représentation immuable d'un flux
(stdout ou stderr) capturé à la fin d'un processus. Le flux est soit
du texte UTF-8 valide, soit marqué comme non décodable.

Example:
    Conversion des octets bruts d'un processus :

        from rust_format.streams import TextStream

        stream = TextStream.from_bytes(b"error: syntax")
        print(stream.is_text)  # True
        print(stream)          # error: syntax

        invalid = TextStream.from_bytes(b"\\xff\\xfe")
        print(invalid)         # (Invalid UTF-8)
"""

from dataclasses import dataclass
from typing import Optional

INVALID_UTF8_DISPLAY = "(Invalid UTF-8)"


@dataclass(frozen=True)
class TextStream:
    """Flux capturé : texte décodé ou marqueur UTF-8 invalide.

    Les deux variantes sont exclusives : ``text`` vaut None pour la
    variante InvalidUtf8, et contient la chaîne décodée sinon.

    Attributes:
        text: Contenu décodé, ou None si les octets ne sont pas
            de l'UTF-8 valide.
    """

    text: Optional[str] = None

    @classmethod
    def from_bytes(cls, data: bytes) -> "TextStream":
        """Décode des octets bruts en UTF-8 strict.

        Une séquence invalide ne lève jamais d'exception : elle
        produit la variante InvalidUtf8.

        Args:
            data: Octets capturés depuis le pipe du processus.

        Returns:
            TextStream décodé ou marqué invalide.
        """
        try:
            return cls(text=data.decode("utf-8"))
        except UnicodeDecodeError:
            return cls.invalid()

    @classmethod
    def invalid(cls) -> "TextStream":
        """Retourne la variante InvalidUtf8."""
        return cls(text=None)

    @property
    def is_text(self) -> bool:
        """True si le flux contient du texte décodé."""
        return self.text is not None

    def __str__(self) -> str:
        if self.text is None:
            return INVALID_UTF8_DISPLAY
        return self.text
