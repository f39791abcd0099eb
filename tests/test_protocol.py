import json

import pytest

from yewchat.protocol import (
    MessageData,
    MsgType,
    UserProfile,
    WebSocketMessage,
    avatar_url,
    decode_message,
    decode_message_data,
    encode_message,
)


def test_encode_register_wire_form():
    message = WebSocketMessage(MsgType.REGISTER, data="alice")
    assert encode_message(message) == '{"messageType":"register","dataArray":null,"data":"alice"}'


@pytest.mark.parametrize(
    "message",
    [
        WebSocketMessage(MsgType.REGISTER, data="alice"),
        WebSocketMessage(MsgType.MESSAGE, data="hello there"),
        WebSocketMessage(MsgType.USERS, data_array=["alice", "bob"]),
        WebSocketMessage(MsgType.USERS, data_array=[]),
        WebSocketMessage(MsgType.MESSAGE, data="héllo 💬"),
    ],
)
def test_round_trip(message):
    assert decode_message(encode_message(message)) == message


def test_encoded_keys_are_camel_case():
    encoded = json.loads(encode_message(WebSocketMessage(MsgType.USERS, data_array=["a"])))
    assert set(encoded) == {"messageType", "dataArray", "data"}
    assert encoded["messageType"] == "users"


def test_decode_missing_optionals():
    message = decode_message('{"messageType":"users"}')
    assert message.message_type is MsgType.USERS
    assert message.data_array is None
    assert message.data is None


def test_decode_ignores_unknown_fields():
    message = decode_message('{"messageType":"message","data":"x","extra":1}')
    assert message == WebSocketMessage(MsgType.MESSAGE, data="x")


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        "[]",
        '{"data":"x"}',
        '{"messageType":"shout"}',
        '{"messageType":3}',
        '{"messageType":"users","dataArray":"alice"}',
        '{"messageType":"users","dataArray":[1,2]}',
        '{"messageType":"message","data":5}',
    ],
)
def test_decode_rejects_malformed(text):
    with pytest.raises(ValueError):
        decode_message(text)


def test_decode_message_data():
    data = decode_message_data('{"from":"alice","message":"hi"}')
    assert data == MessageData(sender="alice", message="hi")


@pytest.mark.parametrize(
    "text",
    ['{"from":"alice"}', '{"message":"hi"}', '{"from":1,"message":"hi"}', "nope", '"str"'],
)
def test_decode_message_data_rejects_malformed(text):
    with pytest.raises(ValueError):
        decode_message_data(text)


def test_avatar_url():
    assert avatar_url("bob") == "https://avatars.dicebear.com/api/adventurer-neutral/bob.svg"


def test_user_profile_from_name():
    profile = UserProfile.from_name("carol")
    assert profile.name == "carol"
    assert profile.avatar == avatar_url("carol")