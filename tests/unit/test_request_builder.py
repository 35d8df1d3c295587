import pytest

from gw2api import (
    Authentication,
    IdParameter,
    InvalidArgumentError,
    Language,
    PendingRequest,
    RequestBuilder,
)
from gw2api.domain.account.models import Account
from gw2api.domain.commerce.models import CurrentTransactions, Exchange
from gw2api.domain.content.models import Achievement, Build, Color, Quaggan
from gw2api.domain.guild.models import Guild, GuildMembers


class TestIdParameter:
    def test_single(self):
        assert IdParameter.single(69).to_query() == "id=69"

    def test_multiple_preserves_order_and_duplicates(self):
        ids = IdParameter.multiple([3, 1, 3])
        assert ids.to_query() == "ids=3,1,3"

    def test_all(self):
        assert str(IdParameter.all()) == "ids=all"

    def test_string_ids_are_percent_encoded(self):
        ids = IdParameter.multiple(["box", "cheer up"])
        assert ids.to_query() == "ids=box,cheer%20up"

    def test_bare_string_is_rejected(self):
        with pytest.raises(InvalidArgumentError):
            IdParameter.multiple("box")
        with pytest.raises(InvalidArgumentError):
            IdParameter.multiple(b"box")

    def test_empty_multiple_is_rejected(self):
        with pytest.raises(InvalidArgumentError):
            IdParameter.multiple([])

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            IdParameter.multiple(iter(()))


class TestRequestBuilder:
    def test_bare_path(self):
        request = RequestBuilder(Build.descriptor).build()
        assert request == PendingRequest("/v2/build", Authentication.NONE, False)

    def test_multiple_ids(self):
        request = RequestBuilder(Color.descriptor).ids(IdParameter.multiple([0, 1, 2, 3])).build()
        assert request.uri == "/v2/colors?ids=0,1,2,3"

    def test_all_ids(self):
        request = RequestBuilder(Color.descriptor).ids(IdParameter.all()).build()
        assert request.uri == "/v2/colors?ids=all"

    def test_single_id(self):
        request = RequestBuilder(Achievement.descriptor).ids(IdParameter.single(69)).build()
        assert request.uri == "/v2/achievements?id=69"
        assert request.localized is True

    def test_string_ids(self):
        request = RequestBuilder(Quaggan.descriptor).ids(IdParameter.multiple(["box", "cheer"])).build()
        assert request.uri == "/v2/quaggans?ids=box,cheer"

    def test_building_twice_is_identical(self):
        def build():
            return (
                RequestBuilder(Color.descriptor)
                .ids(IdParameter.multiple([10, 20]))
                .build()
                .localized_uri(Language.FR)
            )

        assert build() == build()

    def test_authentication_comes_from_descriptor(self):
        assert RequestBuilder(Account.descriptor).build().authentication is Authentication.REQUIRED
        assert Guild.request().path(guild_id="x").build().authentication is Authentication.OPTIONAL

    def test_path_parameters_are_percent_encoded(self):
        request = GuildMembers.request().path(guild_id="a b/c").build()
        assert request.uri == "/v2/guild/a%20b%2Fc/members"

    def test_missing_path_parameter(self):
        with pytest.raises(InvalidArgumentError):
            GuildMembers.request().build()

    def test_query_follows_path(self):
        request = Exchange.request().path(currency="gems").query("quantity", 100).build()
        assert request.uri == "/v2/commerce/exchange/gems?quantity=100"

    def test_query_values_are_percent_encoded(self):
        request = RequestBuilder(Guild.search_descriptor).query("name", "Lords & Ladies").build()
        assert request.uri == "/v2/guild/search?name=Lords%20%26%20Ladies"

    def test_query_follows_id_parameter(self):
        request = (
            RequestBuilder(Color.descriptor)
            .ids(IdParameter.single(1))
            .query("page", 2)
            .build()
        )
        assert request.uri == "/v2/colors?id=1&page=2"

    def test_transaction_side_in_path(self):
        request = CurrentTransactions.request().path(side="buys").build()
        assert request.uri == "/v2/commerce/transactions/current/buys"


class TestLocalization:
    def test_appends_lang_after_query(self):
        request = RequestBuilder(Color.descriptor).ids(IdParameter.single(1)).build()
        assert request.localized_uri(Language.DE) == "/v2/colors?id=1&lang=de"

    def test_starts_query_when_missing(self):
        request = RequestBuilder(Color.descriptor).build()
        assert request.localized_uri(Language.ZH) == "/v2/colors?lang=zh"

    def test_not_localized(self):
        request = RequestBuilder(Build.descriptor).build()
        assert request.localized_uri(Language.ES) == "/v2/build"

    def test_accepts_language_code(self):
        request = RequestBuilder(Color.descriptor).build()
        assert request.localized_uri("fr") == "/v2/colors?lang=fr"
