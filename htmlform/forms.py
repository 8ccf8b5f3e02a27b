from django import forms
from django.core.exceptions import ImproperlyConfigured
from django.http import QueryDict


def _strip_array_suffix(data):
    """Map ``name[]`` keys to ``name`` so multi-valued widgets find them."""

    if data is None:
        return None
    keys = [key for key in data if key.endswith("[]")]
    if not keys:
        return data
    if isinstance(data, QueryDict):
        data = data.copy()
        for key in keys:
            data.setlist(key[:-2], data.getlist(key))
    else:
        data = dict(data)
        for key in keys:
            data[key[:-2]] = data[key]
    return data


class CompoundForm(forms.Form):
    """Form that contains other forms under a name.

    Nested forms are declared in ``subforms`` and share the data of the outer
    form.  Field names use brackets, so the ``city`` field of the ``address``
    subform is submitted as ``address[city]``.
    """

    subforms = {}

    def __init__(self, data=None, files=None, prefix=None, initial=None, **kwargs):
        data = _strip_array_suffix(data)
        super().__init__(data=data, files=files, prefix=prefix, initial=initial, **kwargs)
        self.forms = {}
        for name, form_class in self.subforms.items():
            if not issubclass(form_class, CompoundForm):
                # A plain Form would name its fields "prefix-field".
                raise ImproperlyConfigured(
                    f"Subform '{name}' of {type(self).__name__} must be a CompoundForm, "
                    f"not {form_class.__name__}"
                )
            self.forms[name] = form_class(
                data=data,
                files=files,
                prefix=self.add_prefix(name),
                initial=self.initial.get(name),
                auto_id=self.auto_id,
            )

    def add_prefix(self, field_name):
        return f"{self.prefix}[{field_name}]" if self.prefix else field_name

    def get_item(self, name):
        if name in self.forms:
            return self.forms[name]
        if name in self.fields:
            return self[name]
        return None

    def full_clean(self):
        super().full_clean()
        if not self.is_bound:
            return
        for name, form in self.forms.items():
            if form.is_valid():
                self.cleaned_data[name] = form.cleaned_data

    def is_valid(self):
        results = [form.is_valid() for form in self.forms.values()]
        return super().is_valid() and all(results)
