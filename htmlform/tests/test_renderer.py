import datetime

from django.test import SimpleTestCase

from htmlform.exceptions import DateParseError, PathResolutionError
from htmlform.html import Html
from htmlform.messages import ErrorMessageFormatter
from htmlform.renderer import HtmlForm

from .sample_forms import (
    OPTIONS,
    BlankChoiceForm,
    MultiChoiceForm,
    ProfileForm,
    SingleChoiceForm,
    TagChoiceForm,
)


def render_bound(**data):
    data.setdefault("name", "Ana")
    data.setdefault("color", "a")
    return HtmlForm(ProfileForm(data=data))


class ValueTests(SimpleTestCase):
    def test_value_is_escaped(self):
        hf = HtmlForm(ProfileForm(initial={"name": "A & B"}))
        self.assertEqual(str(hf.value("name")), "A &amp; B")

    def test_empty_value_gives_empty_node(self):
        hf = HtmlForm(ProfileForm())
        self.assertEqual(hf.value("name"), Html())
        self.assertEqual(hf.format("price", "%s USD"), Html())
        self.assertEqual(hf.number("price", 2), Html())
        self.assertEqual(hf.date("born", "Y"), Html())

    def test_format(self):
        hf = render_bound(age="7")
        self.assertEqual(str(hf.format("name", "[%s]")), "[Ana]")
        self.assertEqual(str(hf.format("age", "%03d")), "007")

    def test_number(self):
        hf = render_bound(price="1234.5678")
        self.assertEqual(str(hf.number("price", decimals=2)), "1,234.57")
        self.assertEqual(str(hf.number("price")), "1,235")

    def test_number_with_custom_separators(self):
        hf = render_bound(price="1234567.891")
        self.assertEqual(str(hf.number("price", 2, ",", ".")), "1.234.567,89")

    def test_non_numeric_value_gives_empty_number(self):
        hf = render_bound(price="abc", age="x")
        self.assertEqual(hf.number("price", 2), Html())
        self.assertEqual(hf.format("age", "%03d"), Html())
        self.assertEqual(str(hf.format("age", "%s!")), "x!")

    def test_value_of_multiple_choice_lists_each_value(self):
        hf = HtmlForm(MultiChoiceForm(initial={"x": ["a", "b"]}))
        self.assertEqual(hf.value("x"), Html(children=["a", "b"]))
        self.assertEqual(str(hf.value("x")), "ab")
        self.assertEqual(HtmlForm(MultiChoiceForm()).value("x"), Html())

    def test_date(self):
        hf = render_bound(born="2024-01-15")
        self.assertEqual(str(hf.date("born", "F d, Y")), "January 15, 2024")
        self.assertEqual(str(hf.date("born", "Y-m-d H:i")), "2024-01-15 00:00")

    def test_date_from_initial_date_object(self):
        hf = HtmlForm(ProfileForm(initial={"born": datetime.date(2023, 12, 5)}))
        self.assertEqual(str(hf.date("born", "d/m/Y")), "05/12/2023")

    def test_unparseable_date_raises(self):
        for value in ("invalid-date", "2024-13-45"):
            with self.subTest(value=value):
                with self.assertRaises(DateParseError):
                    render_bound(born=value).date("born", "F d, Y")

    def test_selected_scalar(self):
        hf = HtmlForm(SingleChoiceForm(initial={"x": "b"}))
        self.assertEqual(str(hf.selected("x")), "B")

    def test_selected_multiple(self):
        hf = HtmlForm(MultiChoiceForm(initial={"x": ["c", "a"]}))
        labels = hf.selected("x")
        self.assertEqual([str(label) for label in labels], ["C", "A"])


class InputTests(SimpleTestCase):
    def test_input_text(self):
        hf = HtmlForm(ProfileForm(initial={"name": "X"}))
        expected = Html(
            "input",
            {"type": "text", "name": "name", "value": "X", "required": True, "maxlength": 20},
        )
        self.assertEqual(hf.input_text("name"), expected)

    def test_convenience_wrappers_fix_the_type(self):
        hf = HtmlForm(ProfileForm())
        wrappers = {
            "input_text": "text",
            "input_number": "number",
            "input_email": "email",
            "input_tel": "tel",
            "input_date": "date",
            "input_time": "time",
            "input_datetime_local": "datetime-local",
            "input_search": "search",
            "input_hidden": "hidden",
            "input_password": "password",
            "input_file": "file",
            "input_url": "url",
        }
        for method, input_type in wrappers.items():
            with self.subTest(method=method):
                self.assertEqual(getattr(hf, method)("bio").get_attr("type"), input_type)

    def test_numeric_and_length_ranges(self):
        hf = HtmlForm(ProfileForm())
        age = hf.input_number("age")
        self.assertEqual(age.get_attr("min"), 0)
        self.assertEqual(age.get_attr("max"), 150)
        self.assertIsNone(age.get_attr("maxlength"))
        price = hf.input_number("price")
        self.assertIsNone(price.get_attr("min"))
        self.assertIsNone(price.get_attr("max"))
        zip_code = hf.input_text("address/zip")
        self.assertEqual(zip_code.get_attr("minlength"), 3)
        self.assertEqual(zip_code.get_attr("maxlength"), 8)
        self.assertIsNone(zip_code.get_attr("required"))

    def test_infinite_bounds_are_omitted(self):
        ratio = HtmlForm(ProfileForm()).input_number("ratio")
        self.assertIsNone(ratio.get_attr("min"))
        self.assertIsNone(ratio.get_attr("max"))
        self.assertEqual(ratio, Html("input", {"type": "number", "name": "ratio", "value": ""}))

    def test_readonly_and_disabled(self):
        hf = HtmlForm(ProfileForm())
        self.assertIs(hf.input_text("note").get_attr("readonly"), True)
        self.assertIs(hf.input_text("code").get_attr("disabled"), True)
        self.assertIsNone(hf.input_text("bio").get_attr("readonly"))

    def test_nested_input_uses_bracket_name(self):
        hf = HtmlForm(ProfileForm(initial={"address": {"city": "Lima"}}))
        h = hf.input_text("address/city")
        self.assertEqual(h.get_attr("name"), "address[city]")
        self.assertEqual(h.get_attr("value"), "Lima")
        self.assertEqual(h.get_attr("maxlength"), 40)

    def test_textarea(self):
        hf = HtmlForm(ProfileForm(initial={"bio": "X\nY\nZ"}))
        expected = Html("textarea", {"name": "bio"}, ["X\nY\nZ"])
        self.assertEqual(hf.textarea("bio"), expected)
        self.assertHTMLEqual(str(hf.textarea("bio")), '<textarea name="bio">X\nY\nZ</textarea>')

    def test_input_boolean(self):
        checked = render_bound(agree="on").input_boolean("agree")
        self.assertEqual(
            checked,
            Html("input", {"type": "checkbox", "name": "agree", "value": "1", "checked": True}),
        )
        unchecked = HtmlForm(ProfileForm()).input_boolean("agree", value="yes")
        self.assertEqual(unchecked.get_attr("value"), "yes")
        self.assertIsNone(unchecked.get_attr("checked"))

    def test_invalid_path_produces_no_node(self):
        hf = HtmlForm(ProfileForm())
        with self.assertRaises(PathResolutionError):
            hf.input_text("missing")
        with self.assertRaises(PathResolutionError):
            hf.select("name/first")


class CheckableTests(SimpleTestCase):
    def test_checkboxes_for_single_choice(self):
        hf = HtmlForm(SingleChoiceForm(initial={"x": "b"}))
        expected = {}
        for value, label in OPTIONS:
            h = Html(
                "input",
                {"type": "checkbox", "name": "x", "value": value, "title": label},
            )
            if value == "b":
                h.attr("checked", True)
            expected[value] = h
        self.assertEqual(hf.input_checkboxes("x"), expected)
        self.assertEqual(list(hf.input_checkboxes("x")), ["a", "b", "c"])

    def test_checkboxes_for_multiple_choice(self):
        hf = HtmlForm(MultiChoiceForm(initial={"x": ["a", "b"]}))
        inputs = hf.input_checkboxes("x")
        self.assertEqual({h.get_attr("name") for h in inputs.values()}, {"x[]"})
        self.assertEqual(
            [value for value, h in inputs.items() if h.get_attr("checked")], ["a", "b"]
        )
        self.assertFalse(any(h.get_attr("required") for h in inputs.values()))

    def test_radios_keep_required(self):
        hf = HtmlForm(SingleChoiceForm(initial={"x": "c"}))
        radios = hf.input_radios("x")
        self.assertIs(radios["a"].get_attr("required"), True)
        self.assertEqual(radios["a"].get_attr("type"), "radio")
        self.assertIs(radios["c"].get_attr("checked"), True)

    def test_single_checkable_compares_as_strings(self):
        hf = HtmlForm(ProfileForm(initial={"age": 3}))
        self.assertIs(hf.input_radio("age", 3).get_attr("checked"), True)
        self.assertIsNone(hf.input_checkbox("age", "4").get_attr("checked"))

    def test_bound_multiple_choice_from_array_keys(self):
        form = ProfileForm(data={"name": "Ana", "color": "a", "tags[]": ["a", "c"]})
        inputs = HtmlForm(form).input_checkboxes("tags")
        self.assertIs(inputs["c"].get_attr("checked"), True)
        self.assertIsNone(inputs["b"].get_attr("checked"))

    def test_model_multiple_choice_is_array_valued(self):
        hf = HtmlForm(TagChoiceForm(initial={"x": [1, 2]}))
        checkbox = hf.input_checkbox("x", 1)
        self.assertEqual(checkbox.get_attr("name"), "x[]")
        self.assertIs(checkbox.get_attr("checked"), True)
        self.assertIsNone(hf.input_checkbox("x", 3).get_attr("checked"))
        select = hf.select("x")
        self.assertEqual(select.get_attr("name"), "x[]")
        self.assertIs(select.get_attr("multiple"), True)

    def test_blank_choice_is_checked_like_it_is_selected(self):
        hf = HtmlForm(BlankChoiceForm())
        self.assertIs(hf.input_radio("size", "").get_attr("checked"), True)
        self.assertIsNone(hf.input_radio("size", "a").get_attr("checked"))
        selected = [option.get_attr("value") for option in hf.options("size") if option.get_attr("selected")]
        self.assertEqual(selected, [""])


class SelectTests(SimpleTestCase):
    def test_select_single(self):
        hf = HtmlForm(SingleChoiceForm(initial={"x": "b"}))
        children = [
            Html("option", {"value": value, "selected": value == "b"}, [label])
            for value, label in OPTIONS
        ]
        expected = Html("select", {"name": "x", "required": True}, children)
        self.assertEqual(hf.select("x"), expected)
        self.assertIsNone(hf.select("x").get_attr("multiple"))

    def test_select_multiple(self):
        hf = HtmlForm(MultiChoiceForm(initial={"x": ["a", "c"]}))
        h = hf.select("x")
        self.assertEqual(h.get_attr("name"), "x[]")
        self.assertIs(h.get_attr("multiple"), True)
        self.assertEqual(
            [option.get_attr("value") for option in h.children if option.get_attr("selected")],
            ["a", "c"],
        )

    def test_options_without_choices_is_empty(self):
        self.assertEqual(HtmlForm(ProfileForm()).options("name"), [])


class ErrorTests(SimpleTestCase):
    def test_no_error_gives_empty_fragment(self):
        hf = render_bound()
        self.assertEqual(hf.error("name"), Html())

    def test_identical_messages_are_emitted_once(self):
        hf = HtmlForm(ProfileForm(data={}))
        h = hf.error(["name", "color"])
        self.assertEqual(len(h.children), 1)
        self.assertEqual(str(h), "<div>This field is required.</div>")

    def test_distinct_messages_keep_order(self):
        hf = HtmlForm(
            ProfileForm(data={"color": "a", "name": "x" * 25, "address[city]": ""}),
            ErrorMessageFormatter({"max_length": "At most %(limit_value)s characters."}),
        )
        h = hf.error(["name", "address/city", "color"])
        self.assertEqual(
            [str(child) for child in h.children],
            ["<div>At most 20 characters.</div>", "<div>This field is required.</div>"],
        )

    def test_error_message_override_by_code(self):
        hf = HtmlForm(ProfileForm(data={}), ErrorMessageFormatter({"required": "Please fill in"}))
        self.assertEqual(str(hf.error("name")), "<div>Please fill in</div>")

    def test_unknown_path_in_list_raises(self):
        with self.assertRaises(PathResolutionError):
            HtmlForm(ProfileForm(data={})).error(["name", "nope"])
