# valkey keys
obj = 'obj'
obj1 = 'obj1'
obj2 = 'obj2'
obj3 = 'obj3'
arr = 'arr'
foo = 'foo'
baz = 'baz'
k1 = 'k1'
k2 = 'k2'
nonexistentkey = 'nonexistentkey'

JSON_COHEN = '{"name":"Leonard Cohen","lastSeen":1478476800,"loggedOut": true}'
JSON_HANCOCK = '{"name":"Herbie Hancock","lastSeen":1478476810,"loggedOut": false}'
JSON_SCHIFRIN = '{"name":"Lalo Schifrin","lastSeen":1478476820,"loggedOut": false}'
LAST_SEEN = 1478476800

DATA_PERSON = '''
    {
        "firstName": "John",
        "lastName": "Smith",
        "age": 27,
        "weight": 135.25,
        "isAlive": true,
        "address": {
            "street": "21 2nd Street",
            "city": "New York",
            "state": "NY",
            "zipcode": "10021-3100"
        },
        "phoneNumbers": [
            {"type": "home", "number": "212 555-1234"},
            {"type": "office", "number": "646 555-4567"}
        ],
        "children": [],
        "spouse": null,
        "groups": {}
    }
'''
