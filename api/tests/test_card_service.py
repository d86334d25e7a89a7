import pytest
from sqlmodel import select

from wildcards.core.exceptions import ConflictError, NotFoundError, StorageError, ValidationError
from wildcards.models import Card, CardAction, CardAttribute, CardEffect
from wildcards.schemas.card import CardWriteRequest
from wildcards.services.card_service import create_card, delete_card, update_card


def _request(animal_id, **overrides):
    data = dict(health=10, attack=5, defense=3, cost=2, animal_id=animal_id)
    data.update(overrides)
    return CardWriteRequest(**data)


def _ids(db, column, card_column, card_id):
    return set(db.exec(select(column).where(card_column == card_id)).all())


def _count(db, model):
    return len(db.exec(select(model)).all())


def test_create_card_writes_row_and_all_associations(db, seed):
    request = _request(
        seed["animals"][0],
        ability="Mordida feroz",
        size=4,
        action_ids=seed["actions"][:2],
        attribute_ids=seed["attributes"],
        effect_ids=[seed["effects"][1]],
    )

    card_id = create_card(db, request)

    card = db.get(Card, card_id)
    assert card.ability == "Mordida feroz"
    assert (card.health, card.size, card.attack, card.defense, card.cost) == (10, 4, 5, 3, 2)
    assert _ids(db, CardAction.action_id, CardAction.card_id, card_id) == set(seed["actions"][:2])
    assert _ids(db, CardAttribute.attribute_id, CardAttribute.card_id, card_id) == set(seed["attributes"])
    assert _ids(db, CardEffect.effect_id, CardEffect.card_id, card_id) == {seed["effects"][1]}


def test_create_card_collapses_repeated_ids(db, seed):
    attribute_id = seed["attributes"][0]
    card_id = create_card(db, _request(seed["animals"][0], attribute_ids=[attribute_id, attribute_id]))

    assert _ids(db, CardAttribute.attribute_id, CardAttribute.card_id, card_id) == {attribute_id}


@pytest.mark.parametrize("missing", ["health", "attack", "defense", "cost", "animal_id"])
def test_create_card_requires_fields(db, seed, missing):
    data = dict(health=10, attack=5, defense=3, cost=2, animal_id=seed["animals"][0])
    data[missing] = None
    request = CardWriteRequest(**data)

    with pytest.raises(ValidationError):
        create_card(db, request)

    assert _count(db, Card) == 0


def test_create_card_rejects_animal_bound_to_another_card(db, seed):
    animal_id = seed["animals"][0]
    create_card(db, _request(animal_id))

    with pytest.raises(ConflictError):
        create_card(db, _request(animal_id, attribute_ids=seed["attributes"]))

    assert _count(db, Card) == 1
    assert _count(db, CardAttribute) == 0


def test_create_card_with_unknown_lookup_id_leaves_nothing_behind(db, seed):
    request = _request(seed["animals"][0], action_ids=[seed["actions"][0]], attribute_ids=[9999])

    with pytest.raises(StorageError):
        create_card(db, request)

    assert _count(db, Card) == 0
    assert _count(db, CardAction) == 0
    assert _count(db, CardAttribute) == 0


def test_create_card_with_unknown_animal_is_storage_error(db, seed):
    with pytest.raises(StorageError):
        create_card(db, _request(9999))

    assert _count(db, Card) == 0


def test_update_card_replaces_association_sets(db, seed):
    attributes = seed["attributes"]
    card_id = create_card(
        db,
        _request(seed["animals"][0], attribute_ids=attributes[:2], action_ids=seed["actions"]),
    )

    update_card(db, card_id, _request(seed["animals"][0], attribute_ids=[attributes[2]]))

    assert _ids(db, CardAttribute.attribute_id, CardAttribute.card_id, card_id) == {attributes[2]}
    # Omitted sets end up empty
    assert _ids(db, CardAction.action_id, CardAction.card_id, card_id) == set()
    assert _ids(db, CardEffect.effect_id, CardEffect.card_id, card_id) == set()


def test_update_card_replaces_scalar_fields_and_animal(db, seed):
    card_id = create_card(db, _request(seed["animals"][0]))

    update_card(db, card_id, _request(seed["animals"][1], health=20, ability="Uivo"))

    db.expire_all()
    card = db.get(Card, card_id)
    assert card.health == 20
    assert card.ability == "Uivo"
    assert card.animal_id == seed["animals"][1]


def test_update_missing_card_touches_nothing(db, seed):
    other_id = create_card(db, _request(seed["animals"][0], attribute_ids=seed["attributes"][:1]))

    with pytest.raises(NotFoundError):
        update_card(db, 999, _request(seed["animals"][1], attribute_ids=seed["attributes"]))

    assert _count(db, Card) == 1
    assert _count(db, CardAttribute) == 1
    assert _ids(db, CardAttribute.attribute_id, CardAttribute.card_id, 999) == set()
    assert _ids(db, CardAttribute.attribute_id, CardAttribute.card_id, other_id) == set(seed["attributes"][:1])


def test_update_card_conflict_keeps_previous_state(db, seed):
    first = create_card(db, _request(seed["animals"][0]))
    second = create_card(db, _request(seed["animals"][1], action_ids=[seed["actions"][0]]))

    with pytest.raises(ConflictError):
        update_card(db, second, _request(seed["animals"][0], action_ids=seed["actions"]))

    db.expire_all()
    assert db.get(Card, second).animal_id == seed["animals"][1]
    assert db.get(Card, first).animal_id == seed["animals"][0]
    assert _ids(db, CardAction.action_id, CardAction.card_id, second) == {seed["actions"][0]}


def test_update_card_validates_before_storage(db, seed):
    card_id = create_card(db, _request(seed["animals"][0], health=10))

    with pytest.raises(ValidationError):
        update_card(db, card_id, _request(seed["animals"][0], health=None))

    db.expire_all()
    assert db.get(Card, card_id).health == 10


def test_delete_card_removes_all_association_rows(db, seed):
    card_id = create_card(
        db,
        _request(
            seed["animals"][0],
            action_ids=seed["actions"],
            attribute_ids=seed["attributes"],
            effect_ids=seed["effects"],
        ),
    )

    delete_card(db, card_id)

    assert db.get(Card, card_id) is None
    assert _count(db, CardAction) == 0
    assert _count(db, CardAttribute) == 0
    assert _count(db, CardEffect) == 0


def test_delete_card_twice_reports_not_found(db, seed):
    card_id = create_card(db, _request(seed["animals"][0]))
    delete_card(db, card_id)

    with pytest.raises(NotFoundError):
        delete_card(db, card_id)
    with pytest.raises(NotFoundError):
        delete_card(db, card_id)


def test_delete_missing_card_leaves_other_cards_alone(db, seed):
    card_id = create_card(db, _request(seed["animals"][0], effect_ids=seed["effects"]))

    with pytest.raises(NotFoundError):
        delete_card(db, 999)

    assert db.get(Card, card_id) is not None
    assert _count(db, CardEffect) == len(seed["effects"])


def test_animal_is_free_again_after_its_card_is_deleted(db, seed):
    animal_id = seed["animals"][0]
    delete_card(db, create_card(db, _request(animal_id)))

    assert create_card(db, _request(animal_id)) is not None


def test_create_card_with_out_of_range_value_is_storage_error(db, seed):
    with pytest.raises(StorageError):
        create_card(db, _request(seed["animals"][0], health=10**30, attribute_ids=seed["attributes"]))

    assert _count(db, Card) == 0
    assert _count(db, CardAttribute) == 0
