# inventory/forms.py

from decimal import Decimal

from django import forms

from .models import Category, Product


class CategoryForm(forms.ModelForm):
    """Add / edit a category"""

    class Meta:
        model = Category
        fields = ['name', 'description']
        widgets = {
            'name': forms.TextInput(attrs={
                'class': 'form-control',
                'placeholder': 'Category name'
            }),
            'description': forms.Textarea(attrs={
                'class': 'form-control',
                'rows': 3,
                'placeholder': 'Description (optional)'
            }),
        }

    def clean_name(self):
        name = (self.cleaned_data.get('name') or '').strip()
        if not name:
            raise forms.ValidationError('Category name is required')
        return name


class ProductForm(forms.Form):
    """
    Add-product form.

    The category is either picked from the list or typed in as a new name;
    a typed name is resolved against existing categories before saving.
    """

    name = forms.CharField(
        max_length=200,
        widget=forms.TextInput(attrs={
            'class': 'form-control',
            'placeholder': 'Product name'
        }),
    )

    price = forms.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal('0.00'),
        widget=forms.NumberInput(attrs={
            'class': 'form-control',
            'step': '0.01',
            'min': 0
        }),
    )

    quantity = forms.IntegerField(
        min_value=0,
        initial=0,
        widget=forms.NumberInput(attrs={
            'class': 'form-control',
            'min': 0
        }),
    )

    category = forms.ModelChoiceField(
        queryset=Category.objects.all(),
        required=False,
        empty_label='Select a category',
        widget=forms.Select(attrs={'class': 'form-control'}),
    )

    new_category = forms.CharField(
        max_length=100,
        required=False,
        widget=forms.TextInput(attrs={
            'class': 'form-control',
            'placeholder': 'Or enter a new category'
        }),
        label='New category',
    )

    def clean_name(self):
        name = self.cleaned_data['name'].strip()
        if not name:
            raise forms.ValidationError('Product name is required')
        return name

    def clean(self):
        cleaned = super().clean()
        new_category = (cleaned.get('new_category') or '').strip()
        cleaned['new_category'] = new_category
        if not cleaned.get('category') and not new_category:
            raise forms.ValidationError('Please select a category or enter a new one')
        return cleaned


class ProductUpdateForm(forms.ModelForm):
    """Direct edit of an existing product"""

    class Meta:
        model = Product
        fields = ['name', 'price', 'quantity']
        widgets = {
            'name': forms.TextInput(attrs={'class': 'form-control'}),
            'price': forms.NumberInput(attrs={'class': 'form-control', 'step': '0.01', 'min': 0}),
            'quantity': forms.NumberInput(attrs={'class': 'form-control', 'min': 0}),
        }
