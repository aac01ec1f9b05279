from aryzona.model import (
    ButtonComponent,
    ButtonStyle,
    ChannelType,
    ComplexMessage,
    Embed,
    EmbedField,
    EventNotSupportedError,
    EventType,
    MessageComponentRow,
    Permissions,
    Presence,
    PresenceType,
    has_flag,
    new_permissions,
)


def test_embed_builder_sets_fields_and_returns_same_object():
    embed = Embed()
    result = (
        embed.with_title("Title")
        .with_description("Desc")
        .with_color(0xC0FFEE)
        .with_image("img")
        .with_thumbnail("thumb")
        .with_url("url")
        .with_footer("foot")
    )
    assert result is embed
    assert embed.title == "Title"
    assert embed.description == "Desc"
    assert embed.color == 0xC0FFEE
    assert embed.image_url == "img"
    assert embed.thumbnail_url == "thumb"
    assert embed.url == "url"
    assert embed.footer == "foot"


def test_embed_fields_keep_order_and_inline_flag():
    embed = Embed().with_field("a", "1").with_field_inline("b", "2")
    assert embed.fields == [
        EmbedField(name="a", value="1", inline=False),
        EmbedField(name="b", value="2", inline=True),
    ]


def test_new_embeds_do_not_share_fields():
    first = Embed().with_field("a", "1")
    second = Embed()
    assert second.fields == []
    assert len(first.fields) == 1


def test_permissions_has_and_add():
    perms = new_permissions(Permissions.SEND_MESSAGES, Permissions.VIEW_CHANNEL)
    assert perms.has(Permissions.SEND_MESSAGES)
    assert perms.has(Permissions.VIEW_CHANNEL | Permissions.SEND_MESSAGES)
    assert not perms.has(Permissions.ADMINISTRATOR)
    added = perms.add(Permissions.ADMINISTRATOR)
    assert added.has(Permissions.ADMINISTRATOR)
    assert not perms.has(Permissions.ADMINISTRATOR)


def test_new_permissions_empty_is_zero():
    assert int(new_permissions()) == 0
    assert new_permissions().has(new_permissions())


def test_has_flag_requires_all_bits():
    assert has_flag(0b111, 0b101)
    assert not has_flag(0b100, 0b101)
    assert has_flag(0, 0)


def test_first_permission_bit():
    assert int(new_permissions(Permissions.CREATE_INSTANT_INVITE)) == 1


def test_permission_groups_nest():
    assert Permissions.ALL_CHANNEL.has(Permissions.ALL_TEXT)
    assert Permissions.ALL_CHANNEL.has(Permissions.ALL_VOICE)
    assert Permissions.ALL.has(Permissions.ALL_CHANNEL)
    assert Permissions.ALL.has(Permissions.ADMINISTRATOR)
    assert not Permissions.ALL_TEXT.has(Permissions.CONNECT)
    assert not Permissions.ALL.has(Permissions.MODERATE_MEMBERS)


def test_enum_values_follow_source():
    assert ChannelType("GUILD") is ChannelType.GUILD
    assert ChannelType("DIRECT") is ChannelType.DIRECT
    assert ButtonStyle(ButtonStyle.DANGER.value) is ButtonStyle.DANGER
    assert ButtonStyle.PRIMARY < ButtonStyle.SECONDARY < ButtonStyle.SUCCESS < ButtonStyle.DANGER
    assert [e.value for e in PresenceType] == sorted(e.value for e in PresenceType)
    assert EventType.READY < EventType.MESSAGE_CREATED < EventType.VOICE_STATE_UPDATED


def test_complex_message_defaults():
    message = ComplexMessage(content="hi")
    assert message.embeds == []
    assert message.component_rows == []
    assert message.reply_to is None


def test_button_and_row_defaults():
    button = ButtonComponent(label="ok")
    row = MessageComponentRow(components=[button])
    assert button.style == ButtonStyle.PRIMARY
    assert button.disabled is False
    assert row.components[0].label == "ok"


def test_presence_holds_values():
    presence = Presence(title="t", type=PresenceType.STREAMING, extra="x")
    assert presence.type == PresenceType.STREAMING
    assert (presence.title, presence.extra) == ("t", "x")


def test_event_not_supported_error():
    error = EventNotSupportedError(EventType.READY)
    assert isinstance(error, Exception)
    assert "event not supported" in str(error)