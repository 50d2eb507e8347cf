#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import dataclasses
import unittest

from models.person import Person
from models.label import LabelPlaceholder


class TestPerson(unittest.TestCase):
    def test_fullname(self):
        self.assertEqual(Person('Arthur', 'Dent').fullname, 'Arthur Dent')
        self.assertEqual(Person('', '').fullname, ' ')

    def test_str(self):
        self.assertEqual(str(Person('Arthur', 'Dent')), 'Person(Dent, Arthur)')

    def test_equality(self):
        self.assertEqual(Person('Arthur', 'Dent'), Person('Arthur', 'Dent'))
        self.assertNotEqual(Person('Arthur', 'Dent'), Person('Arthur', 'Prefect'))
        self.assertNotEqual(Person('Arthur', 'Dent'), Person('Ford', 'Dent'))
        # 名和姓互换不相等
        self.assertNotEqual(Person('Dent', 'Arthur'), Person('Arthur', 'Dent'))

    def test_equality_with_other_types(self):
        self.assertNotEqual(Person('Arthur', 'Dent'), 'Person(Dent, Arthur)')
        self.assertFalse(Person('Arthur', 'Dent') == None)  # noqa: E711

    def test_hash_is_xor_of_fields(self):
        p = Person('Zaphod', 'Beeblebrox')
        self.assertEqual(hash(p), hash('Zaphod') ^ hash('Beeblebrox'))
        self.assertEqual(hash(p), hash(Person('Zaphod', 'Beeblebrox')))

    def test_usable_in_sets_and_dicts(self):
        people = {Person('Ford', 'Prefect'), Person('Ford', 'Prefect')}
        self.assertEqual(len(people), 1)
        lookup = {Person('Ford', 'Prefect'): 'towel'}
        self.assertEqual(lookup[Person('Ford', 'Prefect')], 'towel')

    def test_immutable(self):
        p = Person('Arthur', 'Dent')
        with self.assertRaises(dataclasses.FrozenInstanceError):
            p.firstname = 'Trillian'  # type: ignore[misc]

    def test_get_label_placeholder(self):
        label = Person('Arthur', 'Dent').get_label()
        self.assertIsInstance(label, LabelPlaceholder)
        self.assertEqual(label.text, 'Arthur Dent')

    def test_get_label_factory(self):
        created = []

        def factory(text):
            created.append(text)
            return ('label', text)

        label = Person('Ford', 'Prefect').get_label(factory)
        self.assertEqual(label, ('label', 'Ford Prefect'))
        self.assertEqual(created, ['Ford Prefect'])


if __name__ == '__main__':
    unittest.main(verbosity=2)
