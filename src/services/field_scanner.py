"""
Extraction positionnelle de valeurs dans un texte plat.

Permet de recuperer les identifiants d'une reponse de l'API sans parser
le JSON: chaque valeur est le texte qui suit un marqueur litteral
(ex: '"id":') jusqu'a la premiere virgule.
"""

VALUE_DELIMITER = ","


def scan_for_key_values(marker: str, text: str) -> list[str]:
    """
    Extrait la valeur qui suit chaque occurrence d'un marqueur.

    Parcourt le texte de gauche a droite: a chaque occurrence, la suite du
    texte (apres le marqueur) est la nouvelle zone de recherche, et la
    valeur est cette suite coupee a la premiere virgule. Sans virgule, toute
    la suite est prise, y compris les marqueurs suivants.

    Args:
        marker: Marqueur litteral, non vide
        text: Texte a parcourir (peut etre vide)

    Returns:
        Une valeur par occurrence, dans l'ordre d'apparition
        (liste vide si le marqueur est absent)

    Raises:
        ValueError: Si le marqueur est vide

    Example:
        >>> scan_for_key_values('"id":', '{"id":3,"a":1},{"id":1,"a":2}')
        ['3', '1']
    """
    if not marker:
        raise ValueError("Le marqueur ne peut pas etre vide")

    values: list[str] = []
    idx = text.find(marker)
    while idx != -1:
        # debut de la suite du texte apres le marqueur
        start = idx + len(marker)
        end = text.find(VALUE_DELIMITER, start)
        values.append(text[start:] if end == -1 else text[start:end])
        idx = text.find(marker, start)
    return values
