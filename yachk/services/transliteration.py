"""
Translitteration des titres cyrilliques en slug de nom de fichier.

Transforme un titre quelconque en slug ASCII, mots separes par un
underscore et capitalises : "Матрица" -> "Matrica",
"Брат 2" -> "Brat_2".

Etapes :
1. Reparation des sequences mal formees (remplacees par U+FFFD)
2. Normalisation NFC puis passage en minuscules
3. "й" -> "y" avant decomposition (sinon la breve serait retiree)
4. NFD, suppression des marques combinantes (Mn), NFC
5. Table cyrillique -> latin ; ъ/ь fusionnent les lettres voisines ;
   tout caractere hors table ouvre une frontiere de mot
6. Jonction par underscore et capitalisation de chaque mot
"""

import unicodedata
from typing import Union

from yachk.core.exceptions import TransliterationError


# Lettres fusionnantes : aucune sortie, aucune frontiere de mot
MERGE = ""

RUS_TO_LAT: dict[str, str] = {
    "а": "a",
    "б": "b",
    "в": "v",
    "г": "g",
    "д": "d",
    "е": "e",
    "ё": "e",
    "ж": "zh",
    "з": "z",
    "и": "i",
    "й": "y",
    "к": "k",
    "л": "l",
    "м": "m",
    "н": "n",
    "о": "o",
    "п": "p",
    "р": "r",
    "с": "s",
    "т": "t",
    "у": "u",
    "ф": "f",
    "х": "h",
    "ц": "c",
    "ч": "ch",
    "ш": "sh",
    "щ": "sh",
    "ъ": MERGE,
    "ы": "y",
    "ь": MERGE,
    "э": "e",
    "ю": "yu",
    "я": "ya",
}

# Caracteres ASCII conserves tels quels
PASSTHROUGH = frozenset("abcdefghijklmnopqrstuvwxyz0123456789")

WORD_SEPARATOR = "_"


def _repair(text: Union[str, bytes]) -> str:
    """
    Remplace les sequences mal formees par U+FFFD.

    Les bytes sont decodes en UTF-8, les str peuvent contenir des
    surrogates isoles (ex: noms de fichiers decodes en surrogateescape).
    """
    try:
        if isinstance(text, bytes):
            return text.decode("utf-8", errors="replace")
        return text.encode("utf-16", errors="surrogatepass").decode(
            "utf-16", errors="replace"
        )
    except UnicodeError as e:
        raise TransliterationError(f"Cannot repair text: {e}") from e


def _fold(text: str) -> str:
    """Normalise, passe en minuscules et retire les diacritiques."""
    text = unicodedata.normalize("NFC", text).lower()
    text = text.replace("й", "y")
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(c for c in decomposed if unicodedata.category(c) != "Mn")
    return unicodedata.normalize("NFC", stripped)


def transliterate(text: Union[str, bytes]) -> str:
    """
    Translittere un titre en slug pour nom de fichier.

    Fonction pure et deterministe : la meme entree donne toujours la meme
    sortie.

    Args:
        text: Titre a translitterer (str, ou bytes UTF-8)

    Returns:
        Slug ASCII capitalise, chaine vide si aucun caractere reconnu

    Raises:
        TransliterationError: Si le texte ne peut pas etre repare
    """
    folded = _fold(_repair(text))

    words: list[str] = []
    current = ""
    for char in folded:
        latin = RUS_TO_LAT.get(char)
        if latin is None and char in PASSTHROUGH:
            latin = char
        if latin is None:
            # Frontiere : le mot en cours est termine
            if current:
                words.append(current)
                current = ""
            continue
        current += latin
    if current:
        words.append(current)

    return WORD_SEPARATOR.join(word.capitalize() for word in words)
