"""
Module contenant les exceptions personnalisées de rust_format.

Les erreurs de formatage forment une union étiquetée : FormatError porte
un discriminant ``kind`` et chaque sorte d'échec possède exactement une
sous-classe, construite à l'endroit où l'échec est détecté.
"""
from enum import StrEnum

from rust_format.streams import TextStream


class ApplicationError(Exception):
    """Exception de base pour toute la bibliothèque."""
    pass


class FormatErrorKind(StrEnum):
    """Sortes d'échec d'une invocation de formatage."""

    TOOL_MISSING = "tool_missing"
    TOOL_EXECUTION = "tool_execution"
    IO = "io"
    NO_RESULT_CODE = "no_result_code"


class FormatError(ApplicationError):
    """Exception de base pour les échecs de formatage.

    Classe abstraite : seules les sous-classes, qui fixent chacune
    leur ``kind``, sont instanciables.

    Attributes:
        kind: Sorte d'échec (FormatErrorKind).
    """

    kind: FormatErrorKind

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if not isinstance(getattr(cls, "kind", None), FormatErrorKind):
            raise TypeError(
                f"{cls.__name__} doit définir un kind FormatErrorKind."
            )

    def __new__(cls, *args, **kwargs):
        if cls is FormatError:
            raise TypeError(
                "FormatError est abstraite : levez l'une de ses sous-classes."
            )
        return super().__new__(cls, *args, **kwargs)


class ToolMissingError(FormatError):
    """L'outil de formatage est absent de la toolchain.

    Attributes:
        tool_name: Nom de l'outil recherché.
    """

    kind = FormatErrorKind.TOOL_MISSING

    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(
            f"Formatting tool '{tool_name}' not available on toolchain."
        )


class ToolExecutionError(FormatError):
    """L'outil s'est terminé avec un code de retour non nul.

    Attributes:
        code: Code de retour du processus.
        stdout: Sortie standard capturée.
        stderr: Sortie d'erreur capturée.
    """

    kind = FormatErrorKind.TOOL_EXECUTION

    def __init__(
        self, code: int, stdout: TextStream, stderr: TextStream
    ) -> None:
        self.code = code
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(
            f"Error executing formatting tool (code {code}).\n"
            f"Stdout:\n{stdout}\nStderr:{stderr}"
        )


class FormatIOError(FormatError):
    """Échec du système lors du lancement ou de l'attente du processus.

    L'erreur système d'origine est conservée dans ``os_error`` et
    chaînée via ``__cause__`` par l'appelant (``raise ... from``).

    Attributes:
        os_error: Erreur système sous-jacente.
    """

    kind = FormatErrorKind.IO

    def __init__(self, os_error: OSError) -> None:
        self.os_error = os_error
        super().__init__(str(os_error))


class NoResultCodeError(FormatError):
    """Le processus s'est terminé sans code de retour (signal)."""

    kind = FormatErrorKind.NO_RESULT_CODE

    def __init__(self) -> None:
        super().__init__(
            "No result code received from formatting tool process."
        )
