# sales/forms.py

from django import forms


class CustomerForm(forms.Form):
    """Customer details entered on the Receipt screen"""

    customer_name = forms.CharField(
        max_length=200,
        required=False,
        widget=forms.TextInput(attrs={
            'class': 'form-control',
            'placeholder': 'Customer name'
        }),
        label='Customer Name',
    )


class CartLineForm(forms.Form):
    """Add / change / remove one cart line"""

    product_id = forms.IntegerField(min_value=1, widget=forms.HiddenInput)
    quantity = forms.IntegerField(required=False, widget=forms.NumberInput(attrs={
        'class': 'form-control',
        'min': 0
    }))

